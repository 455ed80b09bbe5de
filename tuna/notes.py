"""Note values and note-name parsing.

A ``Note`` bundles the four equivalent descriptions of one semitone on the
grid. Notes are built by a ``PitchCalculator`` (``note_for_index()``,
``note_for_frequency()``, ``parse_note()``) so that letter, octave and
frequency always agree with the calculator's reference pitch.
"""

import dataclasses
import re
import typing

import tuna.letters


_NOTE_NAME_PATTERN = re.compile(r"^\s*([A-Ga-g](?:#|♯|b|♭)?)\s*(-?\d+)\s*$")


@dataclasses.dataclass(frozen=True, order=True)
class Note:

	"""
	A pitch on the semitone grid.

	Notes compare and sort by ``index``.
	"""

	index: int
	letter: tuna.letters.Letter = dataclasses.field(compare=False)
	octave: int = dataclasses.field(compare=False)
	frequency: float = dataclasses.field(compare=False)


	@property
	def name (self) -> str:

		"""Scientific pitch name, e.g. ``"A4"`` or ``"C#5"``."""

		return format_note_name(self.letter, self.octave)


	def __str__ (self) -> str:

		return self.name


def format_note_name (letter: tuna.letters.Letter, octave: int) -> str:

	return f"{letter.value}{octave}"


def parse_note_name (name: str) -> typing.Tuple[tuna.letters.Letter, int]:

	"""Split a note name into its letter and octave.

	Example:
		```python
		parse_note_name("C#4")   # → (Letter.C_SHARP, 4)
		parse_note_name("Eb-1")  # → (Letter.D_SHARP, -1)
		```

	Raises:
		ValueError: If the name is not a letter followed by an integer octave.
	"""

	match = _NOTE_NAME_PATTERN.match(name)

	if match is None:
		raise ValueError(f"Invalid note name: {name!r}. Expected e.g. 'A4', 'C#5', 'Bb3'.")

	return tuna.letters.parse_letter(match.group(1)), int(match.group(2))
