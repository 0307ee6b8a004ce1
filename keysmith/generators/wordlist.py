"""
Passphrase Word List
=====================

Fixed table of 384 unique lowercase words (4 to 8 letters) for
Diceware-style passphrases. Each uniformly drawn word contributes
``log2(384) ~= 8.585`` bits of entropy.

The tuple is built once at import and never mutated.
"""

from __future__ import annotations

WORDLIST: tuple[str, ...] = (
    "able", "acid", "acorn", "actor", "admit", "adobe", "adult", "agent",
    "alarm", "album", "alert", "alien", "alpine", "amber", "ample", "anchor",
    "ankle", "anvil", "apple", "apron", "arena", "argue", "armor", "arrow",
    "atlas", "attic", "audio", "aunt", "avid", "awake", "award", "axis",
    "badge", "bagel", "baker", "bamboo", "barn", "basil", "basin", "batch",
    "beacon", "beard", "bench", "berry", "blade", "blank", "blaze", "blend",
    "blush", "board", "boat", "bonus", "boots", "brave", "bread", "brick",
    "brisk", "broom", "brush", "bucket", "bugle", "cabin", "cable", "cactus",
    "canal", "candle", "canoe", "canyon", "carpet", "carrot", "castle", "cedar",
    "charm", "chess", "chief", "chimney", "cinema", "circus", "citrus", "civic",
    "clamp", "clay", "cliff", "cloak", "cloud", "clover", "coast", "cobalt",
    "comet", "coral", "cotton", "couch", "crane", "crater", "crayon", "creek",
    "crown", "crumb", "crystal", "cube", "curve", "cycle", "daisy", "dance",
    "decor", "delta", "denim", "depot", "detail", "diary", "diesel", "dinner",
    "dock", "dolphin", "donut", "dozen", "drama", "dream", "drift", "drizzle",
    "dune", "eagle", "easel", "echo", "elbow", "elder", "ember", "emblem",
    "energy", "engine", "envoy", "epic", "essay", "ethic", "event", "exact",
    "facet", "falcon", "fancy", "farm", "fender", "ferry", "fiber", "field",
    "finch", "flame", "flask", "fleet", "flora", "flute", "focus", "foggy",
    "forge", "fossil", "fountain", "frame", "frost", "fudge", "gadget", "galaxy",
    "garlic", "gate", "gecko", "gentle", "gherkin", "glacier", "glade", "glider",
    "glove", "goose", "gravel", "gravy", "guitar", "gust", "habit", "halo",
    "harbor", "harvest", "hatch", "haven", "helmet", "herald", "heron", "hickory",
    "honey", "hornet", "hotel", "humble", "igloo", "image", "index", "indigo",
    "input", "island", "ivory", "jacket", "jasmine", "jelly", "jersey", "jewel",
    "jolly", "journal", "judge", "juice", "jungle", "karma", "kayak", "kernel",
    "kiosk", "kitten", "knack", "koala", "ladder", "lagoon", "lantern", "laser",
    "lava", "lemon", "lentil", "level", "linen", "lizard", "llama", "lobby",
    "lotus", "lucky", "lunar", "lyric", "mango", "maple", "marble", "market",
    "meadow", "melon", "mentor", "merit", "metro", "mimic", "mint", "mirror",
    "model", "molar", "monk", "mosaic", "motor", "muffin", "museum", "mystic",
    "nectar", "needle", "nest", "nickel", "noodle", "north", "novel", "nugget",
    "oatmeal", "object", "ocean", "olive", "onion", "opal", "orbit", "orchid",
    "outfit", "oxide", "oyster", "paddle", "panda", "paper", "parade", "parrot",
    "patio", "peach", "pebble", "pecan", "permit", "piano", "pickle", "pilot",
    "pixel", "planet", "plaza", "plum", "pony", "poppy", "potato", "prism",
    "puzzle", "quail", "quartz", "quest", "quilt", "quiver", "rabbit", "radar",
    "raft", "rain", "ranch", "raven", "recipe", "reef", "relic", "rescue",
    "ridge", "river", "robin", "rocket", "rumble", "saddle", "saga", "salad",
    "salsa", "sandal", "satin", "scarf", "season", "shelf", "shelter", "shore",
    "silver", "sketch", "slate", "sloth", "snack", "solar", "sonic", "spark",
    "spiral", "sponge", "spruce", "squid", "stamp", "statue", "steam", "stone",
    "studio", "sugar", "summit", "sunny", "syrup", "table", "talent", "tango",
    "temple", "tennis", "thimble", "thistle", "timber", "toast", "tomato", "topaz",
    "totem", "tower", "trail", "tulip", "turtle", "tweed", "twig", "umbrella",
    "unit", "urban", "utopia", "valley", "venture", "vessel", "violet", "visor",
    "voyage", "waffle", "wagon", "walnut", "wander", "willow", "window", "winter",
    "wombat", "yacht", "yodel", "yogurt", "zenith", "zephyr", "zigzag", "zinc",
)

WORDLIST_SIZE: int = len(WORDLIST)
