"""
Fair Dice - Game Session

The session is a state machine driven by one line of user input at a time:

    INIT -> FIRST_MOVE -> DICE_SELECTION -> ROLL_EXCHANGE -> DONE

Every round that needs a random number opens with a commitment whose tag is
disclosed before the user answers. The round's commitment is held only until
it is revealed, and a new one is drawn for the next round.

``submit`` never raises for bad input: malformed answers are reported as
``INPUT_REJECTED`` events and the phase does not change. Fatal problems
(a failed HMAC check, input after the session ended) propagate.
"""

from __future__ import annotations

import logging
import random

from src.config.settings import Settings, get_settings
from src.engine.base import (
    Commitment,
    EventKind,
    Participant,
    Phase,
    Reveal,
    SessionEvent,
)
from src.engine.dice import DicePool, Die
from src.engine.errors import (
    InputFormatError,
    IntegrityFault,
    PoolIndexError,
    SessionFinishedError,
)
from src.engine.fair_random import FairRandomProtocol
from src.engine.probability import probability_table
from src.engine.validators import parse_choice, parse_dice_configuration, parse_integer

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"x", "X"})
HELP_COMMAND = "?"

FIRST_MOVE_RANGE = 2
ROLL_RANGE = 6


def decide_winner(user_roll: int, computer_roll: int) -> Participant:
    """Strictly higher roll wins; anything else goes to the computer."""
    if user_roll > computer_roll:
        return Participant.USER
    return Participant.COMPUTER


class GameSession:
    """
    One game between the user and the computer.

    Build it with :meth:`start`, then feed each line of input to
    :meth:`submit` and render the returned events.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        protocol: FairRandomProtocol | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.protocol = protocol or FairRandomProtocol(
            digest=self.settings.hmac_digest,
            secret_bytes=self.settings.secret_bytes,
        )
        self.rng = rng
        self.phase = Phase.INIT
        self.pool: DicePool | None = None
        self.assigned: dict[Participant, Die] = {}
        self.rolls: dict[Participant, int] = {}
        self.outcome: Participant | None = None
        self.cancelled = False
        self._pending: Commitment | None = None
        self._roller: Participant | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def start(
        cls,
        dice_input: str | None,
        settings: Settings | None = None,
        protocol: FairRandomProtocol | None = None,
        rng: random.Random | None = None,
    ) -> tuple[GameSession, list[SessionEvent]]:
        """
        Validate the startup input and open the first-move round.

        The supplied values are checked for shape only; the pool is always
        the fixed preset.

        Returns:
            The session (in FIRST_MOVE) and the events produced on the way

        Raises:
            ValidationError: If ``dice_input`` holds too few integers
        """
        session = cls(settings=settings, protocol=protocol, rng=rng)
        configuration = parse_dice_configuration(
            dice_input, min_count=session.settings.min_dice_values
        )
        logger.debug("Startup input accepted: %s", configuration.values)

        session.pool = DicePool.preset()
        session.phase = Phase.FIRST_MOVE
        events = session._open_round(FIRST_MOVE_RANGE)
        events.append(session._prompt())
        return session, events

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_finished(self) -> bool:
        return self.phase == Phase.DONE

    @property
    def pending_tag(self) -> str | None:
        """Disclosed tag of the open round, if any."""
        return self._pending.tag if self._pending is not None else None

    @property
    def current_roller(self) -> Participant | None:
        """Whose roll the open RollExchange round produces."""
        return self._roller

    def help_table(self) -> SessionEvent:
        """Pairwise win chances of the preset dice.

        Runs on its own random source so asking for help never shifts the
        session's rolls.
        """
        preset = [Die.from_sequence(faces) for faces in DicePool.PRESET_FACES]
        rows = probability_table(preset, trials=self.settings.help_trials, rng=random.Random())
        return SessionEvent(EventKind.HELP, {"rows": rows})

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def submit(self, text: str) -> list[SessionEvent]:
        """
        Feed one line of input to the current phase.

        Returns:
            Events produced by this input, in order

        Raises:
            SessionFinishedError: If the session already reached DONE
            IntegrityFault: If a reveal does not match its disclosed tag
        """
        if self.phase == Phase.DONE:
            raise SessionFinishedError("The session has already finished.")
        if self.phase == Phase.INIT:
            raise SessionFinishedError("The session was never started.")

        command = text.strip()
        if command in EXIT_COMMANDS:
            return [self.cancel()]
        if command == HELP_COMMAND:
            return [self.help_table(), self._prompt()]

        handler = {
            Phase.FIRST_MOVE: self._handle_first_move,
            Phase.DICE_SELECTION: self._handle_dice_selection,
            Phase.ROLL_EXCHANGE: self._handle_roll_exchange,
        }[self.phase]

        try:
            return handler(command)
        except (InputFormatError, PoolIndexError) as exc:
            logger.warning("Rejected input %r in %s: %s", command, self.phase.name, exc)
            return [
                SessionEvent(EventKind.INPUT_REJECTED, {"phase": self.phase, "reason": str(exc)}),
                self._prompt(),
            ]

    def cancel(self) -> SessionEvent:
        """Abandon the session without a result."""
        logger.debug("Session cancelled in %s", self.phase.name)
        self.phase = Phase.DONE
        self.cancelled = True
        self._pending = None
        self._roller = None
        return SessionEvent(EventKind.SESSION_CANCELLED)

    # ------------------------------------------------------------------
    # Phase handlers
    # ------------------------------------------------------------------

    def _handle_first_move(self, command: str) -> list[SessionEvent]:
        guess = parse_choice(command, 0, FIRST_MOVE_RANGE - 1)
        reveal = self._close_round()

        # The guess only changes the message; the flow is the same either way.
        events = [
            SessionEvent(
                EventKind.FIRST_MOVE_RESOLVED,
                {
                    "guess": guess,
                    "value": reveal.value,
                    "key": reveal.secret_hex,
                    "computer_first": guess != reveal.value,
                },
            ),
        ]
        self._enter(Phase.DICE_SELECTION)
        events.append(self._prompt())
        return events

    def _handle_dice_selection(self, command: str) -> list[SessionEvent]:
        index = parse_integer(command)
        user_die = self.pool.take(index)
        # The computer always gets the first die left, not a random one.
        computer_die = self.pool.take(0)
        self.assigned[Participant.USER] = user_die
        self.assigned[Participant.COMPUTER] = computer_die
        logger.debug("User took %s, computer holds %s", user_die, computer_die)

        events = [
            SessionEvent(
                EventKind.DICE_ASSIGNED,
                {"user": user_die.faces, "computer": computer_die.faces},
            ),
        ]
        self._enter(Phase.ROLL_EXCHANGE)
        self._roller = Participant.COMPUTER
        events.extend(self._open_round(ROLL_RANGE))
        events.append(self._prompt())
        return events

    def _handle_roll_exchange(self, command: str) -> list[SessionEvent]:
        contribution = parse_choice(command, 0, ROLL_RANGE - 1)
        reveal = self._close_round()
        fair = self.protocol.combine(reveal.value, contribution, ROLL_RANGE)

        # The fair number is disclosed but the face comes from its own draw.
        roller = self._roller
        roll = self.assigned[roller].roll(self.rng)
        self.rolls[roller] = roll
        logger.debug("%s rolled %d", roller.value, roll)

        events = [
            SessionEvent(
                EventKind.FAIR_NUMBER,
                {
                    "participant": roller,
                    "value": reveal.value,
                    "key": reveal.secret_hex,
                    "contribution": contribution,
                    "result": fair,
                    "modulus": ROLL_RANGE,
                },
            ),
            SessionEvent(EventKind.ROLL_RESOLVED, {"participant": roller, "roll": roll}),
        ]

        if roller == Participant.COMPUTER:
            self._roller = Participant.USER
            events.extend(self._open_round(ROLL_RANGE))
            events.append(self._prompt())
            return events

        events.append(self._finish())
        return events

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _enter(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def _open_round(self, upper: int) -> list[SessionEvent]:
        self._pending = self.protocol.commit(upper)
        return [
            SessionEvent(
                EventKind.COMMITMENT_DISCLOSED,
                {
                    "phase": self.phase,
                    "participant": self._roller,
                    "range": upper,
                    "tag": self._pending.tag,
                },
            ),
        ]

    def _close_round(self) -> Reveal:
        commitment = self._pending
        self._pending = None
        reveal = self.protocol.reveal(commitment)
        try:
            self.protocol.verify(commitment.tag, reveal)
        except IntegrityFault:
            self.phase = Phase.DONE
            self._roller = None
            raise
        return reveal

    def _prompt(self) -> SessionEvent:
        """Options accepted by the current phase, as ``(command, label)`` pairs."""
        if self.phase == Phase.DICE_SELECTION:
            options = tuple((str(i), str(die)) for i, die in enumerate(self.pool))
        elif self.phase == Phase.FIRST_MOVE:
            options = tuple((str(i), str(i)) for i in range(FIRST_MOVE_RANGE))
        else:
            options = tuple((str(i), str(i)) for i in range(ROLL_RANGE))
        return SessionEvent(
            EventKind.PROMPT,
            {"phase": self.phase, "participant": self._roller, "options": options},
        )

    def _finish(self) -> SessionEvent:
        user_roll = self.rolls[Participant.USER]
        computer_roll = self.rolls[Participant.COMPUTER]
        self.outcome = decide_winner(user_roll, computer_roll)
        self._roller = None
        self._enter(Phase.DONE)
        logger.info(
            "Game finished: user %d, computer %d, %s wins",
            user_roll, computer_roll, self.outcome.value,
        )
        return SessionEvent(
            EventKind.GAME_FINISHED,
            {
                "user_roll": user_roll,
                "computer_roll": computer_roll,
                "winner": self.outcome,
            },
        )
