"""Line parsing for the text formats fed to the simulation."""

from typing import List, Tuple

from .model.errors import InvalidDimension, InvalidPlacement


def split_size_line(line: str) -> Tuple[str, str]:
    """Split a 'width height' line into its two raw tokens."""
    tokens = (line or '').split()
    if len(tokens) != 2:
        raise InvalidDimension(
            'size', line,
            f"two values separated by whitespace were expected, got {len(tokens)}")
    return tokens[0], tokens[1]


def split_placement_line(line: str) -> Tuple[str, str, str]:
    """Split an 'x y orientation' line into its three raw tokens."""
    tokens = (line or '').split()
    if len(tokens) != 3:
        raise InvalidPlacement(
            'position', line,
            f"three values separated by whitespace were expected, got {len(tokens)}")
    return tokens[0], tokens[1], tokens[2]


def clean_command_line(line: str) -> str:
    return (line or '').strip()


def pair_robot_lines(lines: List[str]) -> List[Tuple[int, str, str]]:
    """
    Group the lines after the size line into (line number, placement, commands).

    Line numbers are 1-based and refer to the placement line. A trailing
    placement line without commands gets an empty command sequence.
    """
    pairs = []
    body = lines[1:]
    for offset in range(0, len(body), 2):
        placement = body[offset]
        commands = body[offset + 1] if offset + 1 < len(body) else ''
        pairs.append((offset + 2, placement, commands))
    return pairs
