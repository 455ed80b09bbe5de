"""The twelve chromatic letters and their fixed order.

The order starts at ``A`` rather than ``C``: position 0 is the letter of the
reference pitch (A4 = 440 Hz by default), so ``index % 12`` picks the letter
directly. Octave numbering still turns over at ``C``; see
``tuna.calculator`` for the offset that reconciles the two.
"""

import enum
import typing


class Letter (enum.Enum):

	"""
	One of the twelve chromatic pitch classes.
	"""

	A = "A"
	A_SHARP = "A#"
	B = "B"
	C = "C"
	C_SHARP = "C#"
	D = "D"
	D_SHARP = "D#"
	E = "E"
	F = "F"
	F_SHARP = "F#"
	G = "G"
	G_SHARP = "G#"


	def __str__ (self) -> str:

		return self.value


	@property
	def position (self) -> int:

		"""Zero-based position of this letter in ``LETTERS``."""

		return LETTERS.index(self)


	@property
	def pitch_class (self) -> int:

		"""C-based pitch class (C = 0 ... B = 11), as used by MIDI."""

		return (self.position + 9) % 12


LETTERS: typing.Tuple[Letter, ...] = (
	Letter.A,
	Letter.A_SHARP,
	Letter.B,
	Letter.C,
	Letter.C_SHARP,
	Letter.D,
	Letter.D_SHARP,
	Letter.E,
	Letter.F,
	Letter.F_SHARP,
	Letter.G,
	Letter.G_SHARP,
)


_FLAT_TO_SHARP: typing.Dict[str, str] = {
	"Bb": "A#",
	"Db": "C#",
	"Eb": "D#",
	"Fb": "E",
	"Gb": "F#",
	"Ab": "G#",
}

_SHARP_WRAPS: typing.Dict[str, str] = {
	"E#": "F",
}


def parse_letter (name: str) -> Letter:

	"""Return the letter for a note name such as ``"C"``, ``"F#"`` or ``"Bb"``.

	Accepts ``#``/``♯`` for sharps and ``b``/``♭`` for flats. Flats and ``E#``
	resolve to the spelling used by ``LETTERS``. ``Cb`` and ``B#`` are
	rejected because they cross an octave boundary. The base letter is
	case-insensitive; the accidental is not, so ``"BB"`` is rejected.

	Raises:
		ValueError: If the name is not a recognised letter.

	Example:
		```python
		parse_letter("Bb")   # → Letter.A_SHARP
		parse_letter("c♯")   # → Letter.C_SHARP
		```
	"""

	text = name.strip().replace("♯", "#").replace("♭", "b")

	if not 1 <= len(text) <= 2:
		raise ValueError(f"Unknown letter: {name!r}. Expected e.g. 'C', 'F#', 'Bb'.")

	key = text[0].upper() + text[1:]
	key = _FLAT_TO_SHARP.get(key, _SHARP_WRAPS.get(key, key))

	try:
		return Letter(key)
	except ValueError:
		raise ValueError(f"Unknown letter: {name!r}. Expected e.g. 'C', 'F#', 'Bb'.") from None
