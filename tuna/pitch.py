"""Placing a measured frequency between the notes around it.

A tuner hears frequencies that rarely sit exactly on the semitone grid.
``pitch_for_frequency()`` finds the nearest note and describes how far the
frequency is from it, and from the neighbouring note on the other side::

    pitch = tuna.pitch.pitch_for_frequency(445.0)
    pitch.note.name              # → "A4"
    pitch.closest_offset.cents   # → 19.56...
    pitch.offsets[1].note.name   # → "A#4"
"""

import dataclasses
import math
import typing

import tuna.calculator
import tuna.notes
import tuna.wave


@dataclasses.dataclass(frozen=True)
class Offset:

	"""
	Distance from a note to a measured frequency.

	Attributes:
		note: The note the distance is measured from.
		frequency: ``measured - note.frequency`` in Hz.
		percentage: ``frequency`` as a percentage of the gap between ``note``
			and its neighbour in the direction of the measured frequency.
		cents: ``1200 * log2(measured / note.frequency)``.
	"""

	note: tuna.notes.Note
	frequency: float
	percentage: float
	cents: float


@dataclasses.dataclass(frozen=True)
class Pitch:

	"""
	A measured frequency with its nearest note and offsets.
	"""

	frequency: float
	note: tuna.notes.Note
	offsets: typing.Tuple[Offset, typing.Optional[Offset]]
	wave: tuna.wave.AcousticWave


	@property
	def closest_offset (self) -> Offset:

		"""The offset with the smallest absolute frequency difference."""

		first, second = self.offsets

		if second is not None and abs(second.frequency) < abs(first.frequency):
			return second

		return first


def _offset (frequency: float, note: tuna.notes.Note, toward: float) -> Offset:

	difference = frequency - note.frequency
	gap = abs(toward - note.frequency)

	return Offset(
		note=note,
		frequency=difference,
		percentage=difference * 100 / gap,
		cents=1200.0 * math.log2(frequency / note.frequency)
	)


def pitch_for_frequency (
	frequency: float,
	calculator: typing.Optional[tuna.calculator.PitchCalculator] = None
) -> Pitch:

	"""Describe ``frequency`` relative to the nearest note and its neighbour.

	The neighbour is the note below when the frequency is at or below the
	nearest note, otherwise the note above. Its offset is ``None`` when that
	neighbour lies outside the calculator's index bounds.

	Raises:
		InvalidFrequency: If the calculator's validator rejects the frequency.
	"""

	if calculator is None:
		calculator = tuna.calculator.DEFAULT_CALCULATOR

	note = calculator.note_for_frequency(frequency)

	step = -1 if note.frequency >= frequency else 1
	semitone = 2 ** (step / 12)
	neighbour_index = note.index + step

	first = _offset(frequency, note, toward=note.frequency * semitone)
	second: typing.Optional[Offset] = None

	if calculator.is_valid_index(neighbour_index):
		neighbour = calculator.note_for_index(neighbour_index)
		second = _offset(frequency, neighbour, toward=neighbour.frequency / semitone)

	return Pitch(
		frequency=frequency,
		note=note,
		offsets=(first, second),
		wave=tuna.wave.AcousticWave(frequency)
	)
