"""Text rendering of session events, shared by the console and Streamlit front-ends."""

from __future__ import annotations

from typing import Iterable, Sequence

from src.engine.base import EventKind, Participant, Phase, ProbabilityRow, SessionEvent

EXIT_HINT = "X - exit"
HELP_HINT = "? - help"


def _faces(faces: Sequence[int]) -> str:
    return "[" + ",".join(str(v) for v in faces) + "]"


def render_help(rows: Sequence[ProbabilityRow]) -> str:
    """Render the win-probability table shown for ``?``."""
    user_width = max([len("User Dice")] + [len(_faces(r.user_faces)) for r in rows])
    comp_width = max([len("Computer Dice")] + [len(_faces(r.computer_faces)) for r in rows])
    header = f"| {'User Dice':<{user_width}} | {'Computer Dice':<{comp_width}} | Win Probability |"
    rule = "-" * len(header)

    lines = [
        "Help: probability that the user dice beats the computer dice.",
        rule,
        header,
        rule,
    ]
    for row in rows:
        lines.append(
            f"| {_faces(row.user_faces):<{user_width}} "
            f"| {_faces(row.computer_faces):<{comp_width}} "
            f"| {row.win_probability:>13.2f} % |"
        )
    lines.append(rule)
    return "\n".join(lines)


def render_event(event: SessionEvent) -> list[str]:
    """Render one event as a list of output lines."""
    kind = event.kind
    data = event.data

    if kind == EventKind.COMMITMENT_DISCLOSED:
        lines = []
        if data["phase"] == Phase.FIRST_MOVE:
            lines.append("Let's determine who makes the first move.")
        elif data["participant"] == Participant.COMPUTER:
            lines.append("It's time for my roll.")
        else:
            lines.append("It's time for your roll.")
        lines.append(
            f"I selected a random value in the range 0..{data['range'] - 1} "
            f"(HMAC={data['tag']})."
        )
        return lines

    if kind == EventKind.PROMPT:
        phase = data["phase"]
        if phase == Phase.FIRST_MOVE:
            lines = ["Try to guess my selection."]
        elif phase == Phase.DICE_SELECTION:
            lines = ["Choose your dice:"]
        else:
            lines = [f"Add your number modulo {len(data['options'])}."]
        lines.extend(f"{command} - {label}" for command, label in data["options"])
        lines.extend([EXIT_HINT, HELP_HINT])
        return lines

    if kind == EventKind.FIRST_MOVE_RESOLVED:
        lines = [f"My selection: {data['value']} (KEY={data['key']})."]
        if data["computer_first"]:
            lines.append("I make the first move.")
        else:
            lines.append("You guessed it, you make the first move.")
        return lines

    if kind == EventKind.DICE_ASSIGNED:
        return [
            f"You choose the {_faces(data['user'])} dice.",
            f"I choose the {_faces(data['computer'])} dice.",
        ]

    if kind == EventKind.FAIR_NUMBER:
        return [
            f"My number is {data['value']} (KEY={data['key']}).",
            f"The fair number generation result is {data['value']} + "
            f"{data['contribution']} = {data['result']} (mod {data['modulus']}).",
        ]

    if kind == EventKind.ROLL_RESOLVED:
        if data["participant"] == Participant.COMPUTER:
            return [f"My roll result is {data['roll']}."]
        return [f"Your roll result is {data['roll']}."]

    if kind == EventKind.GAME_FINISHED:
        if data["winner"] == Participant.USER:
            return [f"You win ({data['user_roll']} > {data['computer_roll']})!"]
        return ["I win!"]

    if kind == EventKind.INPUT_REJECTED:
        return [f"Invalid input. {data['reason']}"]

    if kind == EventKind.HELP:
        return render_help(data["rows"]).splitlines()

    if kind == EventKind.SESSION_CANCELLED:
        return ["Exiting game."]

    raise ValueError(f"No renderer for event {kind!r}.")


def render_events(events: Iterable[SessionEvent]) -> list[str]:
    """Render events in order, flattened into lines."""
    lines: list[str] = []
    for event in events:
        lines.extend(render_event(event))
    return lines
