from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from .cards import Card


class InstructionTag(IntEnum):
    CASINO_REGISTER = 10
    CASINO_DEPOSIT = 11
    CASINO_START_GAME = 12
    CASINO_GAME_MOVE = 13
    CASINO_PLAYER_ACTION = 14
    CASINO_SET_TOURNAMENT_LIMIT = 15
    CASINO_JOIN_TOURNAMENT = 16
    CASINO_START_TOURNAMENT = 17


class SubmissionTag(IntEnum):
    SEED = 0
    TRANSACTIONS = 1  # the only tag a client may submit
    SUMMARY = 2


class GameType(IntEnum):
    BACCARAT = 0
    BLACKJACK = 1
    CASINO_WAR = 2
    CRAPS = 3
    VIDEO_POKER = 4
    HILO = 5
    ROULETTE = 6
    SIC_BO = 7
    THREE_CARD = 8
    ULTIMATE_HOLDEM = 9


class PlayerAction(IntEnum):
    HIT = 0
    STAND = 1
    DOUBLE = 2
    SPLIT = 3
    TOGGLE_SHIELD = 10
    TOGGLE_DOUBLE = 11
    ACTIVATE_SUPER = 12
    CASH_OUT = 20


class BlackjackMove(IntEnum):
    HIT = 0
    STAND = 1
    DOUBLE = 2
    SPLIT = 3


class HiLoGuess(IntEnum):
    HIGHER = 0
    LOWER = 1
    SAME = 2


class BaccaratBet(IntEnum):
    PLAYER = 0
    BANKER = 1
    TIE = 2


class CasinoWarDecision(IntEnum):
    SURRENDER = 0
    GO_TO_WAR = 1


class ThreeCardDecision(IntEnum):
    FOLD = 0
    PLAY = 1


class UltimateHoldemAction(IntEnum):
    CHECK = 0
    BET = 1


class CrapsAction(IntEnum):
    PLACE_BET = 0
    ADD_ODDS = 1
    ROLL = 2
    CLEAR_BETS = 3
    ATOMIC_BATCH = 4


@dataclass(frozen=True)
class RouletteBet:
    bet_type: int
    value: int
    amount: int


@dataclass(frozen=True)
class SicBoBet:
    bet_type: int
    amount: int


@dataclass(frozen=True)
class CrapsBet:
    bet_type: int
    amount: int
    target: int = 0


# Stage labels. Each enum is a str so views compare equal to plain labels.


class BlackjackPhase(str, Enum):
    BETTING = "betting"
    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"
    RESULT = "result"


class CrapsPhase(str, Enum):
    COMEOUT = "comeout"
    POINT = "point"


class CasinoWarStage(str, Enum):
    BETTING = "betting"
    WAR = "war"
    COMPLETE = "complete"


class ThreeCardStage(str, Enum):
    BETTING = "betting"
    DECISION = "decision"
    AWAITING = "awaiting"
    COMPLETE = "complete"


class UltimateHoldemStage(str, Enum):
    BETTING = "betting"
    PREFLOP = "preflop"
    FLOP = "flop"
    RIVER = "river"
    SHOWDOWN = "showdown"
    RESULT = "result"


class VideoPokerStage(str, Enum):
    DEAL = "deal"
    DRAW = "draw"


@dataclass
class BlackjackView:
    player_cards: List[Card]
    dealer_cards: List[Card]
    player_total: int
    dealer_total: int
    phase: BlackjackPhase
    can_double: bool
    can_split: bool
    dealer_hidden: bool


@dataclass
class BaccaratView:
    player_cards: List[Card]
    banker_cards: List[Card]
    player_total: int
    banker_total: int


@dataclass
class CrapsView:
    dice: Optional[Tuple[int, int]]
    point: Optional[int]
    phase: CrapsPhase


@dataclass
class CasinoWarView:
    player_card: Optional[Card]
    dealer_card: Optional[Card]
    stage: CasinoWarStage
    tie_bet: float


@dataclass
class SicBoView:
    dice: Optional[Tuple[int, int, int]]


@dataclass
class ThreeCardView:
    stage: ThreeCardStage
    player_cards: List[Card] = field(default_factory=list)
    dealer_cards: List[Card] = field(default_factory=list)
    pair_plus_bet: float = 0
    six_card_bonus_bet: float = 0
    progressive_bet: float = 0


@dataclass
class UltimateHoldemView:
    stage: UltimateHoldemStage
    player_cards: List[Card] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)
    dealer_cards: List[Card] = field(default_factory=list)
    trips_bet: float = 0
    six_card_bonus_bet: float = 0
    progressive_bet: float = 0


@dataclass
class VideoPokerView:
    stage: VideoPokerStage
    cards: List[Card]


@dataclass
class HiLoView:
    current_card: Optional[Card]
    accumulator: Optional[float]


@dataclass
class RouletteView:
    result: Optional[int]
    is_prison: bool
