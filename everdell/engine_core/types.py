"""
Core enumerations shared by the engine and the catalogs.

All enums are string-valued so they serialize to readable JSON and
compare equal to their raw string form.
"""

from enum import Enum


class ResourceType(str, Enum):
    """Resource tokens. VP is tracked alongside the four goods."""
    TWIG = "TWIG"
    RESIN = "RESIN"
    PEBBLE = "PEBBLE"
    BERRY = "BERRY"
    VP = "VP"


class Season(str, Enum):
    """Player seasons, in play order. A player never wraps back to WINTER."""
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    AUTUMN = "AUTUMN"


class CardType(str, Enum):
    """Card colors."""
    TRAVELER = "TRAVELER"  # Tan
    PRODUCTION = "PRODUCTION"  # Green
    DESTINATION = "DESTINATION"  # Red
    GOVERNANCE = "GOVERNANCE"  # Blue
    PROSPERITY = "PROSPERITY"  # Purple


class CardName(str, Enum):
    """All base game cards."""
    ARCHITECT = "ARCHITECT"
    BARD = "BARD"
    BARGE_TOAD = "BARGE_TOAD"
    CASTLE = "CASTLE"
    CEMETARY = "CEMETARY"
    CHAPEL = "CHAPEL"
    CHIP_SWEEP = "CHIP_SWEEP"
    CLOCK_TOWER = "CLOCK_TOWER"
    COURTHOUSE = "COURTHOUSE"
    CRANE = "CRANE"
    DOCTOR = "DOCTOR"
    DUNGEON = "DUNGEON"
    EVERTREE = "EVERTREE"
    FAIRGROUNDS = "FAIRGROUNDS"
    FARM = "FARM"
    FOOL = "FOOL"
    GENERAL_STORE = "GENERAL_STORE"
    HISTORIAN = "HISTORIAN"
    HUSBAND = "HUSBAND"
    INN = "INN"
    INNKEEPER = "INNKEEPER"
    JUDGE = "JUDGE"
    KING = "KING"
    LOOKOUT = "LOOKOUT"
    MINE = "MINE"
    MINER_MOLE = "MINER_MOLE"
    MONASTERY = "MONASTERY"
    MONK = "MONK"
    PALACE = "PALACE"
    PEDDLER = "PEDDLER"
    POST_OFFICE = "POST_OFFICE"
    POSTAL_PIGEON = "POSTAL_PIGEON"
    QUEEN = "QUEEN"
    RANGER = "RANGER"
    RESIN_REFINERY = "RESIN_REFINERY"
    RUINS = "RUINS"
    SCHOOL = "SCHOOL"
    SHEPHERD = "SHEPHERD"
    SHOPKEEPER = "SHOPKEEPER"
    STOREHOUSE = "STOREHOUSE"
    TEACHER = "TEACHER"
    THEATRE = "THEATRE"
    TWIG_BARGE = "TWIG_BARGE"
    UNDERTAKER = "UNDERTAKER"
    UNIVERSITY = "UNIVERSITY"
    WANDERER = "WANDERER"
    WIFE = "WIFE"
    WOODCARVER = "WOODCARVER"


class LocationType(str, Enum):
    """Board areas a worker can be sent to."""
    BASIC = "BASIC"
    FOREST = "FOREST"
    HAVEN = "HAVEN"
    JOURNEY = "JOURNEY"


class LocationOccupancy(str, Enum):
    """
    How many workers a location holds.

    EXCLUSIVE_FOUR holds one worker below four players and two otherwise.
    """
    EXCLUSIVE = "EXCLUSIVE"
    EXCLUSIVE_FOUR = "EXCLUSIVE_FOUR"
    UNLIMITED = "UNLIMITED"


class LocationName(str, Enum):
    """All base game locations."""
    BASIC_ONE_BERRY = "BASIC_ONE_BERRY"
    BASIC_ONE_BERRY_AND_ONE_CARD = "BASIC_ONE_BERRY_AND_ONE_CARD"
    BASIC_ONE_RESIN_AND_ONE_CARD = "BASIC_ONE_RESIN_AND_ONE_CARD"
    BASIC_ONE_STONE = "BASIC_ONE_STONE"
    BASIC_THREE_TWIGS = "BASIC_THREE_TWIGS"
    BASIC_TWO_CARDS_AND_ONE_VP = "BASIC_TWO_CARDS_AND_ONE_VP"
    BASIC_TWO_RESIN = "BASIC_TWO_RESIN"
    BASIC_TWO_TWIGS_AND_ONE_CARD = "BASIC_TWO_TWIGS_AND_ONE_CARD"

    HAVEN = "HAVEN"

    JOURNEY_FIVE = "JOURNEY_FIVE"
    JOURNEY_FOUR = "JOURNEY_FOUR"
    JOURNEY_THREE = "JOURNEY_THREE"
    JOURNEY_TWO = "JOURNEY_TWO"

    FOREST_TWO_BERRY_ONE_CARD = "FOREST_TWO_BERRY_ONE_CARD"
    FOREST_TWO_WILD = "FOREST_TWO_WILD"
    FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD = "FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD"
    FOREST_COPY_BASIC_ONE_CARD = "FOREST_COPY_BASIC_ONE_CARD"
    FOREST_ONE_PEBBLE_THREE_CARD = "FOREST_ONE_PEBBLE_THREE_CARD"
    FOREST_ONE_TWIG_RESIN_BERRY = "FOREST_ONE_TWIG_RESIN_BERRY"
    FOREST_THREE_BERRY = "FOREST_THREE_BERRY"
    FOREST_TWO_RESIN_ONE_TWIG = "FOREST_TWO_RESIN_ONE_TWIG"
    FOREST_TWO_CARDS_ONE_WILD = "FOREST_TWO_CARDS_ONE_WILD"
    FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD = (
        "FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD"
    )
    FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS = "FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS"


class EventType(str, Enum):
    """Basic events need card counts, special events need two named cards."""
    BASIC = "BASIC"
    SPECIAL = "SPECIAL"


class EventName(str, Enum):
    """All base game events."""
    BASIC_FOUR_PRODUCTION_TAGS = "BASIC_FOUR_PRODUCTION_TAGS"
    BASIC_THREE_DESTINATION = "BASIC_THREE_DESTINATION"
    BASIC_THREE_GOVERNANCE = "BASIC_THREE_GOVERNANCE"
    BASIC_THREE_TRAVELER = "BASIC_THREE_TRAVELER"

    SPECIAL_GRADUATION_OF_SCHOLARS = "SPECIAL_GRADUATION_OF_SCHOLARS"
    SPECIAL_A_BRILLIANT_MARKETING_PLAN = "SPECIAL_A_BRILLIANT_MARKETING_PLAN"
    SPECIAL_PERFORMER_IN_RESIDENCE = "SPECIAL_PERFORMER_IN_RESIDENCE"
    SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES = "SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES"
    SPECIAL_MINISTERING_TO_MISCREANTS = "SPECIAL_MINISTERING_TO_MISCREANTS"
    SPECIAL_CROAK_WART_CURE = "SPECIAL_CROAK_WART_CURE"
    SPECIAL_AN_EVENING_OF_FIREWORKS = "SPECIAL_AN_EVENING_OF_FIREWORKS"
    SPECIAL_A_WEE_RUN_CITY = "SPECIAL_A_WEE_RUN_CITY"
    SPECIAL_TAX_RELIEF = "SPECIAL_TAX_RELIEF"
    SPECIAL_UNDER_NEW_MANAGEMENT = "SPECIAL_UNDER_NEW_MANAGEMENT"
    SPECIAL_ANCIENT_SCROLLS_DISCOVERED = "SPECIAL_ANCIENT_SCROLLS_DISCOVERED"
    SPECIAL_FLYING_DOCTOR_SERVICE = "SPECIAL_FLYING_DOCTOR_SERVICE"
    SPECIAL_PATH_OF_THE_PILGRIMS = "SPECIAL_PATH_OF_THE_PILGRIMS"
    SPECIAL_REMEMBERING_THE_FALLEN = "SPECIAL_REMEMBERING_THE_FALLEN"
    SPECIAL_PRISTINE_CHAPEL_CEILING = "SPECIAL_PRISTINE_CHAPEL_CEILING"
    SPECIAL_THE_EVERDELL_GAMES = "SPECIAL_THE_EVERDELL_GAMES"


class GameInputType(str, Enum):
    """Every kind of decision a player can submit."""
    # Top-level actions
    PLAY_CARD = "PLAY_CARD"
    PLACE_WORKER = "PLACE_WORKER"
    VISIT_DESTINATION_CARD = "VISIT_DESTINATION_CARD"
    CLAIM_EVENT = "CLAIM_EVENT"
    PREPARE_FOR_SEASON = "PREPARE_FOR_SEASON"
    GAME_END = "GAME_END"

    # Continuations of a multi-step effect
    SELECT_CARDS = "SELECT_CARDS"
    SELECT_PLAYED_CARDS = "SELECT_PLAYED_CARDS"
    SELECT_PLAYER = "SELECT_PLAYER"
    SELECT_RESOURCES = "SELECT_RESOURCES"
    DISCARD_CARDS = "DISCARD_CARDS"
    SELECT_LOCATION = "SELECT_LOCATION"
    SELECT_PAYMENT_FOR_CARD = "SELECT_PAYMENT_FOR_CARD"
    SELECT_WORKER_PLACEMENT = "SELECT_WORKER_PLACEMENT"
    SELECT_OPTION_GENERIC = "SELECT_OPTION_GENERIC"


MULTI_STEP_INPUT_TYPES = frozenset({
    GameInputType.SELECT_CARDS,
    GameInputType.SELECT_PLAYED_CARDS,
    GameInputType.SELECT_PLAYER,
    GameInputType.SELECT_RESOURCES,
    GameInputType.DISCARD_CARDS,
    GameInputType.SELECT_LOCATION,
    GameInputType.SELECT_PAYMENT_FOR_CARD,
    GameInputType.SELECT_WORKER_PLACEMENT,
    GameInputType.SELECT_OPTION_GENERIC,
})


class PlayerStatus(str, Enum):
    """Where a player is in their season cycle."""
    DURING_SEASON = "DURING_SEASON"
    PREPARING_FOR_SEASON = "PREPARING_FOR_SEASON"
    GAME_ENDED = "GAME_ENDED"


# Table limits
MAX_HAND_SIZE = 8
MAX_CITY_SIZE = 15
MEADOW_SIZE = 8
STARTING_WORKERS = 2
