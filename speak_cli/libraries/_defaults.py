"""Built-in libraries, moods, and templates.

Template tokens map to library tokens below; ``%seg`` pulls in one of the
segment templates. Segments must never contain ``%seg`` themselves.
"""

from speak_cli.libraries._registry import Mood, WordLibrary
from speak_cli.libraries._rules import MoodFilter, SelectionRule

# -- Word lists ------------------------------------------------------------

_ACTIONS = (
    "accept", "achieve", "admire", "allow", "answer", "argue", "arrange",
    "ask", "avoid", "bake", "believe", "borrow", "build", "burn", "buy",
    "call", "carry", "catch", "celebrate", "change", "chase", "choose",
    "clean", "climb", "collect", "compare", "complain", "consider", "cook",
    "copy", "count", "cover", "create", "cross", "dance", "decide",
    "deliver", "describe", "design", "destroy", "discover", "discuss",
    "draw", "dream about", "drink", "drive", "eat", "enjoy", "examine",
    "explain", "feed", "fight", "find", "fix", "fold", "follow", "forget",
    "forgive", "grow", "guard", "handle", "hate", "hear", "help", "hide",
    "hold", "hug", "ignore", "imagine", "improve", "inspect", "invent",
    "invite", "juggle", "keep", "kick", "knit", "know", "laugh at", "lead",
    "learn", "lend", "like", "listen to", "lose", "love", "manage",
    "measure", "meet", "mention", "miss", "move", "notice", "obtain",
    "offer", "open", "order", "paint", "pass", "pick", "plan", "play",
    "polish", "praise", "prefer", "prepare", "protect", "prove", "pull",
    "push", "question", "read", "recognize", "remember", "repair",
    "replace", "respect", "return", "reveal", "ride", "save", "see",
    "sell", "send", "serve", "share", "sing to", "smell", "sort", "study",
    "support", "suspect", "swap", "taste", "teach", "test", "thank",
    "throw", "tickle", "touch", "trade", "train", "trust", "understand",
    "use", "visit", "wash", "watch", "water", "wear", "welcome", "win",
    "wonder about", "worry about", "wrap", "write about",
)

_MEANINGS = (
    "just", "also", "very", "even", "still", "never", "really", "always",
    "often", "almost", "later", "once", "already", "maybe", "actually",
    "probably", "of course", "perhaps", "sometimes", "finally", "quite",
    "simply", "nearly", "certainly", "quickly", "recently", "usually",
    "exactly", "particularly", "clearly", "indeed", "rather", "suddenly",
    "instead", "eventually", "directly", "secretly", "proudly", "barely",
)

_DESCRIPTIONS = (
    "different", "important", "large", "available", "popular", "basic",
    "difficult", "historical", "hot", "useful", "scared", "emotional",
    "old", "similar", "healthy", "traditional", "entire", "strong",
    "significant", "successful", "expensive", "intelligent", "interesting",
    "poor", "happy", "responsible", "cute", "helpful", "nice", "wonderful",
    "impossible", "serious", "huge", "rare", "technical", "typical",
    "critical", "aware", "global", "legal", "accurate", "capable",
    "dangerous", "dramatic", "efficient", "powerful", "foreign", "hungry",
    "practical", "suitable", "unusual", "famous", "pure", "afraid",
    "obvious", "careful", "unhappy", "aggressive", "logical", "reasonable",
    "strict", "automatic", "massive", "visible", "alive", "angry",
    "desperate", "exciting", "friendly", "lucky", "sorry", "ugly",
    "anxious", "curious", "impressive", "pleasant", "sudden", "terrible",
    "weak", "wooden", "asleep", "confident", "embarrassed", "guilty",
    "lonely", "nervous", "odd", "remarkable", "suspicious", "tall", "tiny",
    "new", "good", "great", "free", "human", "local", "sure", "long",
    "small", "simple", "big", "real", "natural", "physical", "short",
    "special", "true", "clear", "dry", "easy", "cold", "full", "green",
    "late", "proper", "complex", "fast", "original", "wide", "beautiful",
    "active", "safe", "wrong", "quick", "ready", "white", "excellent",
    "unique", "classic", "perfect", "bright", "comfortable", "flat",
    "rich", "warm", "young", "heavy", "valuable", "slow", "clean", "fresh",
    "normal", "secret", "tough", "brown", "cheap", "deep", "thin", "cool",
    "extreme", "fair", "fine", "remote", "vast", "lost", "smooth", "dark",
    "soft", "solid", "weird", "amazing", "busy", "round", "sharp", "thick",
    "wise", "narrow", "proud", "wild", "brave", "calm", "dirty", "grand",
    "honest", "quiet", "brilliant", "empty", "silly", "smart", "furious",
    "awful", "horrible", "gigantic", "spotless", "freezing", "crowded",
    "filthy", "hilarious", "fantastic", "boiling", "starving",
    "fascinating", "ancient", "gorgeous", "terrifying", "astounding",
    "exhausted", "hideous", "purple", "shiny", "fluffy", "soggy",
)

_OBJECTS = (
    "moment of silence", "time travel paradox", "authentic mexican cuisine",
    "crippling student debt", "public ridicule", "inevitable heat death of the universe",
    "miracle of childbirth", "axe body spray", "natural selection",
    "world of warcraft", "homoerotic volleyball montage", "mating display",
    "all-you-can-eat shrimp for $4.99", "raptor attacks", "hot cheese",
    "middle-aged man on roller skates", "care bear stare",
    "oversized lollipops", "self-loathing", "children on leashes",
    "teenage angst", "uppercuts", "customer service representatives",
    "science", "flightless birds", "good sniff", "balanced breakfast",
    "clandestine butt scratch", "passive-aggressive post-it notes",
    "powerful thighs", "forbidden fruit", "skeletor", "fancy feast",
    "sweet, sweet vengeance", "gassy antelope", "kamikaze pilots",
    "falcon with a cap on its head", "kool-aid man", "free samples",
    "big hoopla about nothing", "world peace", "robocop", "chutzpah",
    "oompa-loompas", "puberty", "ghosts", "vigorous jazz hands", "gogurt",
    "darth vader", "sperm whales", "third base", "mime having a stroke",
    "hulk hogan", "emotions", "spontaneous human combustion",
    "old-people smell", "inner demons", "super soaker full of cat pee",
    "aaron burr", "friendly fire", "disappointing birthday party",
    "mathletes", "tiny horse", "william shatner",
    "m. night shyamalan plot twist", "mutually-assured destruction",
    "yeast", "catapults", "hustle", "force", "intelligent design",
    "loose lips", "ubermensch", "american gladiators", "frolicking",
    "genghis khan", "stranger danger", "bop it", "prancing",
    "vigilante justice", "overcompensation", "lifetime of sadness",
    "sunshine and rainbows", "monkey smoking a cigar", "flash flooding",
    "dry heaving", "attitude", "heart of a child", "puppies",
    "little engine that could", "invisible hand", "unfathomable stupidity",
    "re-gifting", "collection of high-tech gadgets", "too much hair gel",
    "same-sex ice dancing", "charisma", "keanu reeves", "nickelback",
    "look-see", "salty surprise", "centaurs", "bill nye the science guy",
    "chivalry", "lunchables", "heartwarming orphans", "fiery poops",
    "another vampire movie", "tangled slinky", "zesty breakfast burrito",
    "cybernetic enhancements", "guys who don't call", "edible underpants",
    "soup that is too hot", "five-dollar footlongs", "horse meat",
    "really cool hat", "stray hair", "token minority", "can of whoop-ass",
    "count chocula", "death ray", "glass ceiling", "american dream",
    "keg stands", "take-backsies", "saxophone solos", "italians",
    "relationship status", "christopher walken", "bees", "college",
    "object permanence", "opposable thumbs", "jibber-jabber",
    "chainsaws for hands", "nicolas cage", "explosions", "repression",
    "assless chaps", "murder most foul", "goblins", "hope", "soul",
    "hot mess", "vikings", "hot people", "seduction", "geese",
    "global warming", "new age music", "hot pockets", "judge judy",
    "spectacular abs", "figgy pudding", "mopey zoo lion",
    "bag of magic beans", "poor life choices", "big bang",
    "friends who eat all the snacks", "goats eating cans",
    "dance of the sugar plum fairy", "me time", "sea of troubles",
    "lumberjack fantasies", "morgan freeman's voice",
    "women in yogurt commercials", "sexy pillow fights", "grandma",
    "friction", "party poopers", "folly of man", "amish",
    "pterodactyl eggs", "team-building exercises", "fear itself",
    "lady gaga", "milk man", "foul mouth", "beached whale",
    "crappy little hand", "low standard of living", "nuanced critique",
    "rival dojo", "web of lies", "woman scorned", "clams",
    "appreciative snapping", "neil patrick harris", "carnies",
    "dorito breath", "enormous scandinavian women", "gandalf",
    "genetically engineered super-soldiers", "george clooney's musk",
    "gladiatorial combat", "good grammar", "hipsters",
    "historical revisionism", "insatiable bloodlust", "jafar",
    "jean-claude van damme", "mad hacky-sack skills", "media coverage",
    "medieval times dinner and tournament", "moral ambiguity", "machete",
    "one thousand slim jims", "ominous background music", "quiche",
    "quivering jowls", "ryan gosling riding in on a white horse",
    "santa claus", "slow motion", "space muffins",
    "sudden poop explosion disease", "economy", "harsh light of day",
    "hiccups", "four arms of vishnu", "words, words, words",
    "inflatable castle", "emotional support ferret", "unattended toaster",
    "orchestra of kazoos", "accidental reply-all", "avocado toast",
)

# -- Libraries -------------------------------------------------------------

DEFAULT_LIBRARIES: tuple[WordLibrary, ...] = (
    WordLibrary("sources", "s", "context of origin", ("i", "we")),
    WordLibrary(
        "possessors", "p", "possession claims",
        ("my", "your", "our", "his", "her", "its", "the", "this"),
    ),
    WordLibrary("subjects", "sub", "entities", ("her", "him", "me", "this", "it", "that")),
    WordLibrary(
        "emotives", "emo", "n-time self-referencing",
        ("am", "can be", "will be", "shall be", "might be", "should be", "could be", "would be"),
        rule=SelectionRule.EMOTIVE_AGREEMENT,
    ),
    WordLibrary(
        "questions", "q", "questions",
        ("can", "will", "shall", "might", "should", "could", "would"),
    ),
    WordLibrary("conditionals", "c", "logical conditions", ("then", "but", "and", "or")),
    WordLibrary(
        "reflections", "ref", "object-oriented self-referencing",
        ("is", "was", "will be"),
        rule=SelectionRule.REFLECTION_AGREEMENT,
    ),
    WordLibrary("actions", "a", "verbs", _ACTIONS),
    WordLibrary("meanings", "m", "adverbs", _MEANINGS),
    WordLibrary("descriptions", "d", "adjectives", _DESCRIPTIONS),
    WordLibrary("objects", "o", "nouns", _OBJECTS, rule=SelectionRule.ARTICLE_INSERTION),
    WordLibrary(
        "influencers", "i", "emotionally influential statements",
        rule=SelectionRule.MOOD_INFLUENCERS,
    ),
    WordLibrary("punctuations", "punc", "punctuation", rule=SelectionRule.MOOD_PUNCTUATIONS),
    WordLibrary("emoticons", "icon", "emoticons", rule=SelectionRule.MOOD_EMOTICONS),
)

# -- Moods -----------------------------------------------------------------

DEFAULT_MOODS: tuple[Mood, ...] = (
    Mood(
        "anger",
        ("goddamnit", "dang it", "argghhh", "grrrrr", "ugh"),
        (".", "...", "!", "!!!", "?!?"),
        (">:)", ">:(", ">:|"),
        filter=MoodFilter.UPPERCASE,
    ),
    Mood(
        "jealousy",
        ("hrmmm", "oh yes", "hey", "oooooo"),
        (".", "...", "!", "?", "!!!", "?!?"),
        (":)", ":(", ":d", "<3", ":c", "c:", ":o", ":O", ".___.", "-___-", "-___-'"),
    ),
    Mood(
        "fear",
        ("oh god", "no", "well", "ummmm"),
        (".", "...", "!", "?", "!!!", "?!?"),
        (":(", ":C", "D:", ":o", ":O", "-___-'"),
    ),
    Mood(
        "paranoia",
        ("wait", "what", "no"),
        (".", "!", "?", "!!!", "?!?"),
        (":|", ":o", ":O", ":p", "<_<", ">_>", "-___-'"),
    ),
    Mood(
        "curiosity",
        ("ooooo", "hey", "wow", "yes", "yo", "oh"),
        (".", "...", "!", "?"),
        (":)", ":3", ":o", ":O", ":D", ";)"),
    ),
    Mood("joyful", ("oh", "yes", "wow", "oh boy"), ("!", "!!!"), (":)", ":D", ":3", "<3", "C:", ":P")),
    Mood("excited", ("oh", "yay", "wow"), ("!", "!!!", "?!?"), (":)", ":D", ":3", "<3", "C:", ":P", ":O")),
    Mood("calm", ("well",), (".", "..."), (":|",)),
    Mood(
        "ashamed",
        ("no", "uhhh", "ummmm", "sorry"),
        ("...",),
        (":(", "D:", ":C", ":L", ".___.", "-___-", "-___-'"),
    ),
    Mood("apathetic", ("meh",), ("...",), (":|", ".___.", "-___-")),
    Mood("logical", ("yes", "no"), (".",), (":|",)),
)

# -- Templates -------------------------------------------------------------

DEFAULT_STATEMENTS: tuple[str, ...] = (
    "if %seg, %c %seg",
    "%seg%punc %seg",
    "should %s %a %p? %o %c %m %a %p %d %o",
    "%i, %seg",
    "%seg",
    "%seg. %i",
    "%s %emo %d, %c? %seg",
    "i don't always %a, but when i do, it's %o",
    "maybe she's born with it.  maybe it's %o",
    "i got 99 problems but %o ain't one",
    "i eat to forget %p %o",
    "%seg.  that's how i want to go",
    "for my next trick, i will pull %o out of %o",
    "%o is a slippery slope that leads to %o",
    "%seg%punc  high five, bro",
    "during meetings, i like to think about %o",
    "%seg: kid-tested, mother-approved",
    "%o + %o = %o",
    "science will never explain %o",
    "my country, 'tis of thee, sweet land of %o",
    "#%o",
    "%o.tumblr.com",
    "%o@%o.com",
    "%o. the other white meat",
    "you're not gonna believe this, but %seg",
    "%o ain't nothin' to mess with",
    "i like %o, but %i, %a the %o already",
)

DEFAULT_SEGMENTS: tuple[str, ...] = (
    "%s %emo %d",
    "%p? %o %ref? %d",
    "%p %o %ref %o",
    "%s %a %sub, %o",
    "%s %a %o",
    "%s %a %p %d? %o",
    "%o %ref %p %d %o",
    "%s %q %a %o",
    "%m %a %sub",
    "%i",
    "%o",
    "%s %q %m? %a %o",
)
