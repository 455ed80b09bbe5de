"""Conversions between pitch index, frequency and (letter, octave).

A pitch index counts semitones from the reference pitch of a ``Standard``
(A4 = 440 Hz by default): index 0 is the reference, positive indices are
higher and negative indices lower.

The three representations convert as follows::

    frequency = 2 ** (index / 12) * standard.frequency
    index     = round(12 * log2(frequency / standard.frequency))

The only lossy step is the rounding in ``index_for_frequency()``, which
snaps arbitrary frequencies onto the semitone grid. Ties round half away
from zero.

Letters are ordered from ``A`` (see ``tuna.letters``) while octave numbers
change at ``C``. The octave formulas below are anchored on that: the
reference ``A`` sits 9 semitones above the ``C`` that opens its octave, so
``A``, ``A#`` and ``B`` belong to the octave that starts below them.

Valid indices and octaves are derived from a ``FrequencyValidator``: the
index bounds are the indices of its minimum and maximum frequency, and the
octave bounds are the octaves of those two indices.

Every calculator is immutable and safe to share between threads::

    calculator = PitchCalculator()
    calculator.frequency_for_index(12)            # → 880.0
    calculator.index_for_letter(Letter.C, 4)      # → -9
    baroque = PitchCalculator(Standard(frequency=415.0))
"""

import dataclasses
import math
import typing

import tuna.errors
import tuna.frequency_validator
import tuna.letters
import tuna.notes


@dataclasses.dataclass(frozen=True)
class Standard:

	"""
	Reference pitch: the frequency and octave of index 0.
	"""

	frequency: float = 440.0
	octave: int = 4


	def __post_init__ (self) -> None:

		if self.frequency <= 0:
			raise ValueError(f"reference frequency must be positive, got {self.frequency}")


@dataclasses.dataclass(frozen=True)
class ClosedRange:

	"""
	Inclusive integer range.
	"""

	lower: int
	upper: int


	def __contains__ (self, value: object) -> bool:

		return isinstance(value, int) and self.lower <= value <= self.upper


	def __iter__ (self) -> typing.Iterator[int]:

		return iter(range(self.lower, self.upper + 1))


	def __len__ (self) -> int:

		return max(0, self.upper - self.lower + 1)


def round_half_away_from_zero (value: float) -> int:

	"""Round to the nearest integer, sending ties away from zero.

	Python's built-in ``round()`` sends ties to the even neighbour, which
	would make ``2.5`` and ``1.5`` both land on ``2``.

	Example:
		```python
		round_half_away_from_zero(2.5)    # → 3
		round_half_away_from_zero(-2.5)   # → -3
		round_half_away_from_zero(2.4)    # → 2
		```
	"""

	magnitude = abs(value)
	whole = math.floor(magnitude)

	if magnitude - whole >= 0.5:
		whole += 1

	return int(math.copysign(whole, value))


# Letters before C (A, A#, B) are counted in the octave below the one that
# starts at C, so positions 3..11 take a full-octave offset.
_OCTAVE_OFFSETS: typing.Tuple[int, ...] = tuple(
	0 if position < 3 else len(tuna.letters.LETTERS)
	for position in range(len(tuna.letters.LETTERS))
)


class PitchCalculator:

	"""
	Stateless conversion engine tied to one reference pitch and frequency range.

	Parameters:
		standard: Reference pitch. Defaults to A4 = 440 Hz.
		validator: Accepted frequency range. Defaults to C0..C8.

	Raises:
		InvalidFrequency: If the validator's own bounds are rejected by the
			validator (never the case for a well-formed range).
	"""

	def __init__ (
		self,
		standard: typing.Optional[Standard] = None,
		validator: typing.Optional[tuna.frequency_validator.FrequencyValidator] = None
	) -> None:

		self._standard = standard if standard is not None else Standard()
		self._validator = validator if validator is not None else tuna.frequency_validator.FrequencyValidator()

		self._index_bounds = ClosedRange(
			self.index_for_frequency(self._validator.minimum),
			self.index_for_frequency(self._validator.maximum)
		)

		self._octave_bounds = ClosedRange(
			self.octave_for_index(self._index_bounds.lower),
			self.octave_for_index(self._index_bounds.upper)
		)


	def __repr__ (self) -> str:

		return f"PitchCalculator(standard={self._standard!r}, validator={self._validator!r})"


	@property
	def standard (self) -> Standard:

		return self._standard


	@property
	def validator (self) -> tuna.frequency_validator.FrequencyValidator:

		return self._validator


	# ─── Bounds ───────────────────────────────────────────────────────────────


	@property
	def index_bounds (self) -> ClosedRange:

		"""Indices of the validator's minimum and maximum frequency."""

		return self._index_bounds


	@property
	def octave_bounds (self) -> ClosedRange:

		"""Octaves of the two ends of ``index_bounds``."""

		return self._octave_bounds


	# ─── Validation ───────────────────────────────────────────────────────────


	def is_valid_index (self, index: int) -> bool:

		return index in self._index_bounds


	def validate_index (self, index: int) -> None:

		if not self.is_valid_index(index):
			raise tuna.errors.InvalidPitchIndex(
				f"Pitch index {index} is outside {self._index_bounds.lower}..{self._index_bounds.upper}"
			)


	def is_valid_octave (self, octave: int) -> bool:

		return octave in self._octave_bounds


	def validate_octave (self, octave: int) -> None:

		if not self.is_valid_octave(octave):
			raise tuna.errors.InvalidOctave(
				f"Octave {octave} is outside {self._octave_bounds.lower}..{self._octave_bounds.upper}"
			)


	def is_valid_frequency (self, frequency: float) -> bool:

		return self._validator.is_valid(frequency)


	def validate_frequency (self, frequency: float) -> None:

		self._validator.validate(frequency)


	# ─── Index to frequency, letter and octave ────────────────────────────────


	def frequency_for_index (self, index: int) -> float:

		"""Return the frequency in Hz of a pitch index, unrounded."""

		self.validate_index(index)

		power = index / len(tuna.letters.LETTERS)

		return 2 ** power * self._standard.frequency


	def letter_for_index (self, index: int) -> tuna.letters.Letter:

		"""Return the letter of a pitch index (0 → A, -9 → C)."""

		self.validate_index(index)

		count = len(tuna.letters.LETTERS)
		position = count - abs(index) % count if index < 0 else index % count

		if position == count:
			position = 0

		if not 0 <= position < count:
			raise tuna.errors.InvalidPitchIndex(f"Pitch index {index} maps to no letter")

		return tuna.letters.LETTERS[position]


	def octave_for_index (self, index: int) -> int:

		"""Return the C-based octave number of a pitch index.

		Non-negative indices count up from the ``C`` nine semitones below the
		reference. Negative indices count down, with that ``C`` (index -9)
		the last note still in the reference octave. The negative branch
		works on ``abs(index)`` so it never depends on how division rounds
		negative numbers.
		"""

		self.validate_index(index)

		count = len(tuna.letters.LETTERS)

		if index < 0:
			return self._standard.octave - (abs(index) + 2) // count

		return self._standard.octave + (index + 9) // count


	# ─── Back to a pitch index ────────────────────────────────────────────────


	def index_for_frequency (self, frequency: float) -> int:

		"""Return the nearest pitch index for a frequency.

		Raises:
			InvalidFrequency: If the validator rejects the frequency.
		"""

		self._validator.validate(frequency)

		count = len(tuna.letters.LETTERS)

		return round_half_away_from_zero(count * math.log2(frequency / self._standard.frequency))


	def index_for_letter (self, letter: tuna.letters.Letter, octave: int) -> int:

		"""Return the pitch index of a letter in an octave.

		Only the octave is validated. Near the ends of the octave bounds the
		result can lie outside ``index_bounds`` (C8 is valid, C#8 is not).
		"""

		self.validate_octave(octave)

		count = len(tuna.letters.LETTERS)
		position = tuna.letters.LETTERS.index(letter)

		return position + count * (octave - self._standard.octave) - _OCTAVE_OFFSETS[position]


	# ─── Notes ────────────────────────────────────────────────────────────────


	def note_for_index (self, index: int) -> tuna.notes.Note:

		return tuna.notes.Note(
			index=index,
			letter=self.letter_for_index(index),
			octave=self.octave_for_index(index),
			frequency=self.frequency_for_index(index)
		)


	def note_for_frequency (self, frequency: float) -> tuna.notes.Note:

		"""Return the note nearest to ``frequency``."""

		return self.note_for_index(self.index_for_frequency(frequency))


	def note_for_letter (self, letter: tuna.letters.Letter, octave: int) -> tuna.notes.Note:

		"""Return the note for a letter and octave, both of which must be in bounds."""

		return self.note_for_index(self.index_for_letter(letter, octave))


	def parse_note (self, name: str) -> tuna.notes.Note:

		"""Return the note for a name such as ``"A4"``, ``"C#5"`` or ``"Bb-1"``."""

		letter, octave = tuna.notes.parse_note_name(name)

		return self.note_for_letter(letter, octave)


	def lower (self, note: tuna.notes.Note) -> tuna.notes.Note:

		"""Return the note one semitone below ``note``."""

		return self.note_for_index(note.index - 1)


	def higher (self, note: tuna.notes.Note) -> tuna.notes.Note:

		"""Return the note one semitone above ``note``."""

		return self.note_for_index(note.index + 1)


DEFAULT_CALCULATOR = PitchCalculator()
