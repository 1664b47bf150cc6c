"""Static curated word/score table used to seed every lexicon."""

from __future__ import annotations

from typing import Dict, Tuple

HIGH_QUALITY_SCORE = 85
MEDIUM_QUALITY_SCORE = 60
CROSSWORDESE_SCORE = 45

HIGH_QUALITY: Tuple[str, ...] = (
    # 3 letters
    "ACE", "ACT", "ADD", "AGE", "AID", "AIM", "AIR", "ALL", "AND", "ANT",
    "ANY", "APE", "ARC", "ARE", "ARK", "ARM", "ART", "ASK", "ATE", "AWE",
    "AXE", "BAD", "BAG", "BAR", "BAT", "BED", "BEE", "BET", "BIG", "BIT",
    "BOW", "BOX", "BOY", "BUD", "BUG", "BUS", "BUT", "BUY", "CAB", "CAN",
    "CAP", "CAR", "CAT", "COB", "COD", "COG", "COP", "COT", "COW", "CRY",
    "CUB", "CUD", "CUP", "CUT", "DAB", "DAD", "DAM", "DAY", "DEN", "DEW",
    "DID", "DIG", "DIM", "DIP", "DOC", "DOE", "DOG", "DOT", "DRY", "DUB",
    "DUD", "DUE", "DUG", "EAR", "EAT", "EEL", "EGG", "ELF", "ELK", "ELM",
    "EMU", "END", "ERA", "EVE", "EWE", "EYE", "FAN", "FAR", "FAT", "FAX",
    "FED", "FEE", "FEW", "FIG", "FIN", "FIR", "FIT", "FIX", "FLY", "FOB",
    "FOE", "FOG", "FOR", "FOX", "FRY", "FUN", "FUR", "GAP", "GAS", "GEL",
    "GEM", "GET", "GIN", "GOD", "GOT", "GUM", "GUN", "GUT", "GUY", "HAD",
    "HAM", "HAS", "HAT", "HAY", "HEN", "HER", "HEY", "HID", "HIM", "HIP",
    "HIS", "HIT", "HOG", "HOP", "HOT", "HOW", "HUB", "HUE", "HUG", "HUT",
    "ICE", "ICY", "ILL", "INK", "INN", "ION", "IRE", "ITS", "IVY", "JAB",
    "JAM", "JAR", "JAW", "JAY", "JET", "JOB", "JOG", "JOT", "JOY", "JUG",
    "KEG", "KEY", "KID", "KIN", "KIT", "LAB", "LAD", "LAG", "LAP", "LAW",
    "LAY", "LED", "LEG", "LET", "LID", "LIE", "LIP", "LIT", "LOG", "LOT",
    "LOW", "MAD", "MAN", "MAP", "MAT", "MAY", "MEN", "MET", "MIX", "MOB",
    "MOP", "MUD", "MUG", "NAP", "NET", "NEW", "NIT", "NOD", "NOR", "NOT",
    "NOW", "NUT", "OAK", "OAR", "OAT", "ODD", "OFF", "OFT", "OIL", "OLD",
    "ONE", "OPT", "ORB", "ORE", "OUR", "OUT", "OWE", "OWL", "OWN", "PAD",
    "PAN", "PAT", "PAW", "PAY", "PEA", "PEN", "PET", "PIE", "PIG", "PIN",
    "PIT", "POD", "POT", "PRO", "PUB", "PUN", "PUP", "PUT", "RAG", "RAM",
    "RAN", "RAP", "RAT", "RAW", "RAY", "RED", "RIB", "RID", "RIG", "RIM",
    "RIP", "ROB", "ROD", "ROE", "ROT", "ROW", "RUB", "RUG", "RUN", "RUT",
    "RYE", "SAD", "SAG", "SAP", "SAT", "SAW", "SAY", "SEA", "SEE", "SET",
    "SEW", "SHE", "SHY", "SIN", "SIP", "SIR", "SIT", "SIX", "SKI", "SKY",
    "SLY", "SOB", "SOD", "SON", "SOW", "SOY", "SPA", "SPY", "STY", "SUB",
    "SUM", "SUN", "TAB", "TAG", "TAN", "TAP", "TAR", "TEA", "TEN", "THE",
    "TIE", "TIN", "TIP", "TOE", "TON", "TOO", "TOP", "TOW", "TOY", "TRY",
    "TUB", "TUG", "TWO", "URN", "USE", "VAN", "VAT", "VET", "VIA", "VOW",
    "WAR", "WAS", "WAX", "WAY", "WEB", "WED", "WET", "WHO", "WHY", "WIG",
    "WIN", "WIT", "WOE", "WOK", "WON", "WOO", "WOW", "YAK", "YAM", "YAP",
    "YEN", "YES", "YET", "YEW", "YOU", "ZAP", "ZEN", "ZIP", "ZOO",
    # 4 letters
    "ABLE", "ACHE", "ACID", "ACRE", "AGED", "ALSO", "AMID", "ARCH", "AREA",
    "ARMY", "ATOM", "AUTO", "BABY", "BACK", "BAKE", "BALL", "BAND", "BANK",
    "BARK", "BARN", "BASE", "BATH", "BEAR", "BEAT", "BEEN", "BEER", "BELL",
    "BELT", "BEND", "BENT", "BEST", "BETA", "BIKE", "BILL", "BIND", "BIRD",
    "BITE", "BLOW", "BLUE", "BOAT", "BODY", "BOIL", "BOLD", "BOLT", "BOMB",
    "BOND", "BONE", "BOOK", "BOOM", "BOOT", "BORN", "BOSS", "BOTH", "BOWL",
    "BRAG", "BREW", "BUCK", "BULB", "BULK", "BULL", "BUMP", "BURN", "BURY",
    "BUSH", "BUSY", "CAFE", "CAGE", "CAKE", "CALF", "CALL", "CALM", "CAME",
    "CAMP", "CARD", "CARE", "CART", "CASE", "CASH", "CAST", "CAVE", "CELL",
    "CHEF", "CHEW", "CHIP", "CHOP", "CITY", "CLAM", "CLAP", "CLAW", "CLAY",
    "COAL", "COAT", "CODE", "COIN", "COLD", "COME", "COOK", "COOL", "COPE",
    "COPY", "CORD", "CORE", "CORN", "COST", "CREW", "CROP", "CROW", "CUBE",
    "CURE", "DARE", "DARK", "DART", "DATA", "DATE", "DAWN", "DEAL", "DEAR",
    "DEBT", "DECK", "DEED", "DEEP", "DEER", "DESK", "DIAL", "DICE", "DIET",
    "DIME", "DINE", "DIRT", "DISH", "DIVE", "DOCK", "DOME", "DONE", "DOOR",
    "DOSE", "DOVE", "DOWN", "DRAW", "DROP", "DRUM", "DUCK", "DUEL", "DUNE",
    "DUSK", "DUST", "DUTY", "EACH", "EARN", "EAST", "EASY", "ECHO", "EDGE",
    "EDIT", "ELSE", "EPIC", "EVEN", "EVER", "EVIL", "EXAM", "EXIT", "FACE",
    "FACT", "FADE", "FAIL", "FAIR", "FAKE", "FALL", "FAME", "FARM", "FAST",
    "FATE", "FEAR", "FEAST", "FEED", "FEEL", "FILE", "FILL", "FILM", "FIND",
    "FINE", "FIRE", "FIRM", "FISH", "FIST", "FLAG", "FLAT", "FLEA", "FLOW",
    "FOAM", "FOLD", "FOLK", "FOOD", "FOOT", "FORK", "FORM", "FORT", "FOUR",
    "FREE", "FROG", "FUEL", "FULL", "FUSE", "GAIN", "GAME", "GATE", "GEAR",
    "GIFT", "GIRL", "GIVE", "GLAD", "GLOW", "GLUE", "GOAL", "GOAT", "GOLD",
    "GOLF", "GONE", "GOOD", "GOWN", "GRAB", "GRID", "GRIN", "GRIP", "GROW",
    "GULF", "HAIR", "HALF", "HALL", "HAND", "HANG", "HARD", "HARM", "HARP",
    "HATE", "HAUL", "HAWK", "HEAD", "HEAL", "HEAP", "HEAR", "HEAT", "HELD",
    "HELP", "HERB", "HERD", "HERE", "HERO", "HIDE", "HIGH", "HIKE", "HILL",
    "HINT", "HIRE", "HOLD", "HOLE", "HOME", "HOOD", "HOOK", "HOPE", "HORN",
    "HOSE", "HOST", "HOUR", "HUGE", "HUNT", "HURT", "IDEA", "INCH", "IRON",
    "ITEM", "JAIL", "JOKE", "JUMP", "JURY", "JUST", "KEEN", "KEEP", "KICK",
    "KIND", "KING", "KISS", "KITE", "KNEE", "KNIT", "KNOT", "KNOW", "LACE",
    "LACK", "LADY", "LAKE", "LAMB", "LAMP", "LAND", "LANE", "LAST", "LATE",
    "LAWN", "LEAD", "LEAF", "LEAN", "LEAP", "LEFT", "LEND", "LENS", "LESS",
    "LIFE", "LIFT", "LIKE", "LIME", "LINE", "LINK", "LION", "LIST", "LIVE",
    "LOAD", "LOAN", "LOCK", "LOFT", "LONE", "LONG", "LOOK", "LOOP", "LORD",
    "LOSE", "LOSS", "LOST", "LOUD", "LOVE", "LUCK", "MADE", "MAIL", "MAIN",
    "MAKE", "MALE", "MALL", "MANY", "MARK", "MASK", "MAST", "MATE", "MAZE",
    "MEAL", "MEAN", "MEAT", "MEET", "MELT", "MENU", "MESH", "MILD", "MILE",
    "MILK", "MILL", "MIND", "MINE", "MINT", "MISS", "MIST", "MODE", "MOLD",
    "MOOD", "MOON", "MORE", "MOSS", "MOST", "MOTH", "MOVE", "MUCH", "MULE",
    "MUST", "NAIL", "NAME", "NAVY", "NEAR", "NEAT", "NECK", "NEED", "NEST",
    "NEWS", "NEXT", "NICE", "NINE", "NODE", "NONE", "NOON", "NORM", "NOSE",
    "NOTE", "OATH", "ODOR", "OKAY", "ONCE", "ONLY", "OPEN", "ORAL", "OVEN",
    "OVER", "PACE", "PACK", "PAGE", "PAID", "PAIL", "PAIN", "PAIR", "PALE",
    "PALM", "PARK", "PART", "PASS", "PAST", "PATH", "PEAK", "PEAR", "PEEL",
    "PINE", "PINK", "PIPE", "PLAN", "PLAY", "PLOT", "PLUG", "PLUM", "POEM",
    "POET", "POLE", "POLL", "POND", "POOL", "POOR", "PORT", "POSE", "POST",
    "POUR", "PRAY", "PULL", "PUMP", "PURE", "PUSH", "RACE", "RACK", "RAFT",
    "RAGE", "RAID", "RAIL", "RAIN", "RAMP", "RANK", "RARE", "RATE", "READ",
    "REAL", "REAR", "REED", "REEF", "REST", "RICE", "RICH", "RIDE", "RING",
    "RIOT", "RISE", "RISK", "ROAD", "ROAR", "ROBE", "ROCK", "RODE", "ROLE",
    "ROLL", "ROOF", "ROOM", "ROOT", "ROPE", "ROSE", "RUBY", "RULE", "RUSH",
    "RUST", "SAFE", "SAGE", "SAID", "SAIL", "SALE", "SALT", "SAME", "SAND",
    "SAVE", "SCAR", "SEAL", "SEAT", "SEED", "SEEK", "SEEM", "SELF", "SELL",
    "SEND", "SHED", "SHIP", "SHOE", "SHOP", "SHOT", "SHOW", "SHUT", "SICK",
    "SIDE", "SIGN", "SILK", "SING", "SINK", "SITE", "SIZE", "SKIN", "SLAB",
    "SLED", "SLIM", "SLIP", "SLOT", "SLOW", "SNOW", "SOAP", "SOCK", "SOFA",
    "SOFT", "SOIL", "SOLD", "SOLE", "SOME", "SONG", "SOON", "SORT", "SOUL",
    "SOUP", "SOUR", "SPIN", "SPOT", "STAR", "STAY", "STEM", "STEP", "STIR",
    "STOP", "SUIT", "SURE", "SWAN", "SWIM", "TAIL", "TAKE", "TALE", "TALK",
    "TALL", "TAME", "TANK", "TAPE", "TASK", "TEAM", "TEAR", "TELL", "TENT",
    "TERM", "TEST", "TEXT", "THAN", "THAT", "THEM", "THEN", "THEY", "THIN",
    "TIDE", "TIDY", "TIER", "TILE", "TIME", "TINY", "TIRE", "TOAD", "TOLD",
    "TOLL", "TOMB", "TONE", "TOOL", "TOUR", "TOWN", "TRAP", "TRAY", "TREE",
    "TRIM", "TRIO", "TRIP", "TRUE", "TUBE", "TUNA", "TUNE", "TURN", "TWIN",
    "TYPE", "UNIT", "UPON", "USED", "USER", "VASE", "VAST", "VERB", "VERY",
    "VEST", "VIEW", "VINE", "VOTE", "WADE", "WAGE", "WAIT", "WAKE", "WALK",
    "WALL", "WAND", "WANT", "WARM", "WARN", "WASH", "WAVE", "WEAK", "WEAR",
    "WEED", "WEEK", "WELL", "WENT", "WEST", "WHAT", "WHEN", "WIDE", "WIFE",
    "WILD", "WILL", "WIND", "WINE", "WING", "WIRE", "WISE", "WISH", "WITH",
    "WOLF", "WOOD", "WOOL", "WORD", "WORK", "WORM", "WRAP", "YARD", "YARN",
    "YEAR", "YOGA", "ZERO", "ZONE", "ZOOM",
    # 5 letters
    "ABOUT", "ABOVE", "ACTOR", "ADAPT", "ADMIT", "ADOPT", "ADULT", "AFTER",
    "AGAIN", "AGENT", "AGREE", "AHEAD", "ALARM", "ALBUM", "ALERT", "ALIEN",
    "ALIGN", "ALIKE", "ALIVE", "ALLEY", "ALLOW", "ALONE", "ALONG", "ALPHA",
    "ALTER", "AMONG", "ANGEL", "ANGER", "ANGLE", "ANGRY", "APART", "APPLE",
    "APPLY", "ARENA", "ARGUE", "ARISE", "ARMOR", "AROMA", "ARRAY", "ARROW",
    "ASIDE", "ASSET", "ATLAS", "AUDIO", "AUDIT", "AVOID", "AWAIT", "AWAKE",
    "AWARD", "AWARE", "BADLY", "BAKER", "BASIC", "BASIN", "BASIS", "BATCH",
    "BEACH", "BEARD", "BEAST", "BEGAN", "BEGIN", "BEING", "BELLY", "BELOW",
    "BENCH", "BERRY", "BLACK", "BLADE", "BLAME", "BLANK", "BLAST", "BLAZE",
    "BLEED", "BLEND", "BLESS", "BLIND", "BLOCK", "BLOOD", "BLOOM", "BOARD",
    "BOAST", "BONUS", "BOOST", "BRAIN", "BRAKE", "BRAND", "BRAVE", "BREAD",
    "BREAK", "BRICK", "BRIDE", "BRIEF", "BRING", "BROAD", "BROOK", "BROWN",
    "BRUSH", "BUILD", "BUNCH", "CABIN", "CABLE", "CAMEL", "CANAL", "CANDY",
    "CARGO", "CARRY", "CATCH", "CAUSE", "CEDAR", "CHAIN", "CHAIR", "CHALK",
    "CHARM", "CHART", "CHASE", "CHEAP", "CHECK", "CHEEK", "CHESS", "CHEST",
    "CHIEF", "CHILD", "CHILL", "CIVIC", "CLAIM", "CLASS", "CLEAN", "CLEAR",
    "CLERK", "CLIFF", "CLIMB", "CLOCK", "CLOSE", "CLOUD", "COACH", "COAST",
    "COCOA", "COUNT", "COURT", "COVER", "CRAFT", "CRANE", "CRASH", "CRATE",
    "CREAM", "CREEK", "CRISP", "CROWD", "CROWN", "CRUSH", "CURVE", "CYCLE",
    "DAILY", "DAIRY", "DANCE", "DEALT", "DEPTH", "DEVIL", "DIARY", "DINER",
    "DITCH", "DODGE", "DOUBT", "DOUGH", "DOZEN", "DRAFT", "DRAIN", "DRAMA",
    "DREAM", "DRESS", "DRIFT", "DRILL", "DRINK", "DRIVE", "EAGER", "EAGLE",
    "EARLY", "EARTH", "EIGHT", "ELBOW", "ELDER", "ELECT", "EMPTY", "ENJOY",
    "ENTER", "ENTRY", "EQUAL", "ERROR", "EVENT", "EXACT", "EXIST", "EXTRA",
    "FAITH", "FALSE", "FANCY", "FEAST", "FENCE", "FERRY", "FEVER", "FIBER",
    "FIELD", "FIFTY", "FIGHT", "FINAL", "FLAME", "FLASH", "FLEET", "FLOAT",
    "FLOOD", "FLOOR", "FLOUR", "FLUID", "FOCUS", "FORCE", "FORGE", "FORUM",
    "FRAME", "FRESH", "FRONT", "FROST", "FRUIT", "GIANT", "GLASS", "GLOBE",
    "GLORY", "GLOVE", "GOOSE", "GRACE", "GRADE", "GRAIN", "GRAND", "GRANT",
    "GRAPE", "GRASP", "GRASS", "GRAVE", "GREAT", "GREEN", "GREET", "GRILL",
    "GROUP", "GUARD", "GUESS", "GUEST", "GUIDE", "HABIT", "HAPPY", "HARSH",
    "HEART", "HEAVY", "HEDGE", "HELLO", "HONEY", "HORSE", "HOTEL", "HOUSE",
    "HUMAN", "HUMOR", "IDEAL", "IMAGE", "INDEX", "INNER", "INPUT", "IRONY",
    "ISSUE", "IVORY", "JEANS", "JELLY", "JEWEL", "JOINT", "JUDGE", "JUICE",
    "KNIFE", "KNOCK", "LABEL", "LARGE", "LASER", "LATER", "LAUGH", "LAYER",
    "LEARN", "LEASE", "LEAST", "LEAVE", "LEMON", "LEVEL", "LIGHT", "LIMIT",
    "LINEN", "LIVER", "LOCAL", "LODGE", "LOGIC", "LOOSE", "LOVER", "LOWER",
    "LOYAL", "LUNAR", "LUNCH", "MAGIC", "MAJOR", "MAKER", "MANOR", "MAPLE",
    "MARCH", "MATCH", "MAYOR", "MEDAL", "MEDIA", "MELON", "MERCY", "MERIT",
    "METAL", "MIDST", "MINOR", "MODEL", "MONEY", "MONTH", "MORAL", "MOTOR",
    "MOUNT", "MOUSE", "MOUTH", "MOVIE", "MUSIC", "NERVE", "NEVER", "NIGHT",
    "NOBLE", "NOISE", "NORTH", "NOVEL", "NURSE", "OCEAN", "OFFER", "OFTEN",
    "OLIVE", "ONION", "OPERA", "ORBIT", "ORDER", "OTHER", "OUTER", "OWNER",
    "OZONE", "PAINT", "PANEL", "PAPER", "PARTY", "PASTA", "PATCH", "PAUSE",
    "PEACE", "PEARL", "PEDAL", "PENNY", "PHASE", "PHONE", "PHOTO", "PIANO",
    "PIECE", "PILOT", "PITCH", "PIZZA", "PLACE", "PLAIN", "PLANE", "PLANT",
    "PLATE", "POINT", "POLAR", "PORCH", "POUND", "POWER", "PRESS", "PRICE",
    "PRIDE", "PRIME", "PRINT", "PRIZE", "PROOF", "PROUD", "PULSE", "PUNCH",
    "PUPIL", "QUEEN", "QUEST", "QUICK", "QUIET", "QUOTE", "RADIO", "RAISE",
    "RANCH", "RANGE", "RAPID", "RATIO", "REACH", "READY", "REALM", "REBEL",
    "RELAX", "REPLY", "RIDER", "RIDGE", "RIFLE", "RIGHT", "RIVAL", "RIVER",
    "ROAST", "ROBOT", "ROCKY", "ROUGH", "ROUND", "ROUTE", "ROYAL", "RURAL",
    "SALAD", "SAUCE", "SCALE", "SCARF", "SCENE", "SCENT", "SCOPE", "SCORE",
    "SCOUT", "SENSE", "SERVE", "SEVEN", "SHADE", "SHAKE", "SHAPE", "SHARE",
    "SHARK", "SHARP", "SHEEP", "SHEET", "SHELF", "SHELL", "SHIFT", "SHINE",
    "SHIRT", "SHOCK", "SHORE", "SHORT", "SHOUT", "SIGHT", "SKILL", "SLATE",
    "SLEEP", "SLICE", "SLIDE", "SLOPE", "SMALL", "SMART", "SMILE", "SMOKE",
    "SNAKE", "SOLAR", "SOLID", "SOLVE", "SOUND", "SOUTH", "SPACE", "SPARE",
    "SPARK", "SPEAK", "SPEED", "SPELL", "SPEND", "SPICE", "SPINE", "SPOON",
    "SPORT", "SQUAD", "STACK", "STAFF", "STAGE", "STAIR", "STAKE", "STAMP",
    "STAND", "START", "STATE", "STEAM", "STEEL", "STICK", "STILL", "STOCK",
    "STONE", "STOOL", "STORE", "STORM", "STORY", "STOVE", "STRAW", "STUDY",
    "STYLE", "SUGAR", "SUITE", "SUNNY", "SUPER", "SWEET", "SWIFT", "SWING",
    "SWORD", "TABLE", "TASTE", "TEACH", "TEETH", "THEME", "THICK", "THING",
    "THINK", "THORN", "THREE", "THROW", "THUMB", "TIGER", "TIGHT", "TIMER",
    "TITLE", "TOAST", "TODAY", "TOKEN", "TOOTH", "TOPIC", "TORCH", "TOTAL",
    "TOUCH", "TOUGH", "TOWER", "TRACK", "TRADE", "TRAIL", "TRAIN", "TREAT",
    "TREND", "TRIAL", "TRIBE", "TRICK", "TRUCK", "TRUST", "TRUTH", "TULIP",
    "TWIST", "ULTRA", "UNCLE", "UNDER", "UNION", "UNITY", "UPPER", "UPSET",
    "URBAN", "USUAL", "VALID", "VALUE", "VALVE", "VAPOR", "VAULT", "VENUE",
    "VERSE", "VIDEO", "VIRUS", "VISIT", "VITAL", "VIVID", "VOCAL", "VOICE",
    "WAGON", "WASTE", "WATCH", "WATER", "WHALE", "WHEAT", "WHEEL", "WHITE",
    "WHOLE", "WIDTH", "WOMAN", "WORLD", "WORRY", "WORTH", "WOUND", "WRIST",
    "WRITE", "YACHT", "YIELD", "YOUNG", "YOUTH", "ZEBRA",
    # 6 letters
    "ABROAD", "ABSENT", "ABSORB", "ACCENT", "ACCEPT", "ACCESS", "ACCORD",
    "ACCUSE", "ACTION", "ACTIVE", "ACTUAL", "ADVICE", "ADVISE", "AFFAIR",
    "AFFECT", "AFFORD", "AFRAID", "AGENDA", "AGREED", "ALMOST", "ALWAYS",
    "AMOUNT", "ANIMAL", "ANNUAL", "ANSWER", "ANYONE", "APPEAL", "APPEAR",
    "ARTIST", "ASSUME", "ATTACK", "ATTEND", "AUTHOR", "AVENUE", "BACKED",
    "BACKUP", "BANNER", "BARREL", "BASKET", "BATTLE", "BEAUTY", "BECAME",
    "BECOME", "BEFORE", "BEHALF", "BEHIND", "BELIEF", "BELONG", "BESIDE",
    "BETTER", "BEYOND", "BISHOP", "BITTER", "BLOCKS", "BORDER", "BOTTLE",
    "BRANCH", "BREATH", "BRIDGE", "BRIGHT", "BUCKET", "BUDGET", "BUTTER",
    "BUTTON", "CAMERA", "CANDLE", "CANVAS", "CARBON", "CAREER", "CASTLE",
    "CELLAR", "CENTER", "CHANCE", "CHANGE", "CHARGE", "CHERRY", "CHOICE",
    "CIRCLE", "CLIENT", "CLOSET", "COFFEE", "COLUMN", "COMBAT", "COMEDY",
    "COPPER", "CORNER", "COTTON", "COUSIN", "CREDIT", "CRUISE", "DANGER",
    "DEBATE", "DECADE", "DESIGN", "DETAIL", "DINNER", "DOCTOR", "DOUBLE",
    "DRAGON", "DRAWER", "EASILY", "EFFECT", "EFFORT", "EMPIRE", "ENERGY",
    "ENGINE", "ESCAPE", "EXPERT", "FABRIC", "FAMILY", "FATHER", "FELLOW",
    "FIGURE", "FINGER", "FLIGHT", "FLOWER", "FOREST", "FROZEN", "GARDEN",
    "GENTLE", "GLOBAL", "GOLDEN", "GUITAR", "HAMMER", "HARBOR", "HEALTH",
    "HEIGHT", "HELMET", "HIDDEN", "HONEST", "INCOME", "INSECT", "ISLAND",
    "JACKET", "JUNGLE", "KETTLE", "LADDER", "LEADER", "LEGEND", "LESSON",
    "LETTER", "LIQUID", "LITTLE", "LIVING", "MARKET", "MASTER", "MEADOW",
    "MEMORY", "MIRROR", "MOMENT", "MOTHER", "MUSEUM", "NATION", "NATURE",
    "NEEDLE", "NORMAL", "NUMBER", "OBJECT", "OFFICE", "ORANGE", "OXYGEN",
    "PALACE", "PARENT", "PEPPER", "PERIOD", "PERSON", "PLANET", "POCKET",
    "POETRY", "POLICE", "PUZZLE", "RABBIT", "REASON", "RECORD", "REPAIR",
    "RESULT", "RIBBON", "SADDLE", "SAFETY", "SAILOR", "SAMPLE", "SCHOOL",
    "SCREEN", "SEASON", "SECRET", "SHADOW", "SILVER", "SIMPLE", "SINGER",
    "SISTER", "SKETCH", "SOCCER", "SPIDER", "SPRING", "SQUARE", "STREAM",
    "STREET", "STRING", "SUMMER", "SUMMIT", "SUNSET", "SYMBOL", "TABLET",
    "TALENT", "TARGET", "TEMPLE", "TENNIS", "THEORY", "TICKET", "TIMBER",
    "TOMATO", "TRAVEL", "TUNNEL", "TURTLE", "VALLEY", "VELVET", "WALNUT",
    "WINDOW", "WINTER", "WIZARD", "WONDER", "YELLOW",
    # 7+ letters
    "ABANDON", "ABILITY", "ABSENCE", "ACCOUNT", "ACHIEVE", "ACQUIRE", "ADDRESS",
    "ADVANCE", "AGAINST", "ALREADY", "ANCIENT", "ANOTHER", "ANXIETY",
    "ANYBODY", "APPLIED", "APPROVE", "ARTICLE", "ATTEMPT", "ATTRACT", "AVERAGE",
    "BACKING", "BALANCE", "BANKING", "BARGAIN", "BARRIER", "BASEBALL", "BATTERY",
    "BEATING", "BECAUSE", "BEDROOM", "BELIEVE", "BENEFIT", "BESIDES", "BIGGEST",
    "BILLION", "BINDING", "BLANKET", "BLOCKED", "BOOKING", "CABBAGE", "CAPTAIN",
    "CARPET", "CENTURY", "CHAPTER", "CHICKEN", "CLIMATE", "COMPASS", "CONCERT",
    "COUNTRY", "CRYSTAL", "CURTAIN", "DIAMOND", "DOLPHIN", "EASTERN", "ECONOMY",
    "FEATHER", "FESTIVAL", "GALLERY", "HARVEST", "HEADING", "HISTORY", "HOLIDAY",
    "JOURNEY", "KITCHEN", "LANTERN", "LIBRARY", "MACHINE", "MORNING", "MYSTERY",
    "NETWORK", "ORCHARD", "PAINTER", "PASSAGE", "PENGUIN", "PICTURE", "PILGRIM",
    "PROBLEM", "RAINBOW", "SEASIDE", "STATION", "THUNDER", "TRUMPET", "VILLAGE",
    "VOLCANO", "WEATHER", "WESTERN", "WHISPER",
)

MEDIUM_QUALITY: Tuple[str, ...] = (
    "AJAR", "AQUA", "AXLE", "BOAR", "CEDE", "CLOD", "CRUX", "DAIS", "DOLT",
    "EDGY", "FAWN", "GAWK", "GNAW", "HAZE", "IBEX", "JEER", "KEEL", "LAUD",
    "MELD", "NEWT", "OPUS", "PYRE", "QUAY", "RIFT", "SILO", "TUSK", "ULNA",
    "VANE", "WANE", "YAWL", "ZEAL", "ABODE", "AGILE", "BRAWL", "CRYPT",
    "DROLL", "ELFIN", "FJORD", "GLAZE", "HUSKY", "INFER", "JAUNT", "KNOLL",
    "LUCID", "MIRTH", "NEEDY", "OVERT", "PLUMB", "QUALM", "REIGN", "SCALD",
    "ADO", "ALE", "ASH", "ASP", "AWL", "BAA", "BOA", "COO", "DEN", "DIN",
    "EBB", "EKE", "ELL", "ERR", "GNU", "HEM", "HEW", "IMP", "JIB", "KEN",
    "LEI", "LYE", "NAB", "NAG", "NIB", "OAF", "ODE", "OHM", "ORC", "PEW",
    "PLY", "PUG", "RUE", "SAC", "SOP", "SUE", "TAD", "TOT", "VIM", "YAW",
)

# Overused crossword fill: kept usable, but at a lower score and flagged.
CROSSWORDESE: Tuple[str, ...] = (
    "OREO", "ERIE", "ALOE", "EPEE", "ESNE", "ANOA", "UNAU",
    "ETUI", "OLEO", "OLIO", "OAST", "OGEE", "ALEE", "ASEA",
    "ARIA", "AREA", "EDEN", "EMIT", "EMIR", "ELAN", "ERNE",
    "OSSA", "OTIC", "OMIT", "ORAL", "EWER", "EASE", "EAVE",
    "APSE", "ALGA", "AGUE", "AGIO", "AGEE", "ANTE", "ANTI",
    "ATOP", "AIDE", "ACME", "ACRE", "EDNA", "ELBA", "ELMS",
    "EDDY", "EARL", "EKED", "ELHI", "ELEM",
    "EELS", "EBON", "EBBS", "ETAS", "ETCH", "ETNA", "EURO",
)


def base_word_scores() -> Dict[str, int]:
    """Return the curated table as ``word -> score``.

    Crosswordese entries only receive the lower score when they are not
    already part of the high or medium quality lists.
    """

    scores: Dict[str, int] = {word: CROSSWORDESE_SCORE for word in CROSSWORDESE}
    for word in MEDIUM_QUALITY:
        scores[word] = MEDIUM_QUALITY_SCORE
    for word in HIGH_QUALITY:
        scores[word] = HIGH_QUALITY_SCORE
    return scores
