"""MIDI note numbers and messages for notes.

Uses the MIDI Manufacturers Association convention C4 = 60, so with the
default reference pitch A4 (index 0) is MIDI note 69::

    import tuna.midi

    note = tuna.calculator.DEFAULT_CALCULATOR.parse_note("C4")
    tuna.midi.midi_number(note)             # → 60
    tuna.midi.note_on(note, velocity=90)    # mido.Message('note_on', note=60, ...)
"""

import typing

import mido

import tuna.calculator
import tuna.letters
import tuna.notes


MIDI_MIN_NOTE = 0
MIDI_MAX_NOTE = 127


def midi_number (note: tuna.notes.Note) -> int:

	"""Return the MIDI note number of ``note``.

	Raises:
		ValueError: If the note lies outside the MIDI range 0..127.
	"""

	number = 12 * (note.octave + 1) + note.letter.pitch_class

	if not MIDI_MIN_NOTE <= number <= MIDI_MAX_NOTE:
		raise ValueError(f"Note {note.name} is outside the MIDI note range")

	return number


def note_for_midi_number (
	number: int,
	calculator: typing.Optional[tuna.calculator.PitchCalculator] = None
) -> tuna.notes.Note:

	"""Return the note for a MIDI note number.

	Raises:
		ValueError: If ``number`` is outside 0..127.
		InvalidOctave: If the note's octave is outside the calculator's bounds.
		InvalidPitchIndex: If the note's index is outside the calculator's bounds.
	"""

	if not MIDI_MIN_NOTE <= number <= MIDI_MAX_NOTE:
		raise ValueError(f"MIDI note number must be between {MIDI_MIN_NOTE} and {MIDI_MAX_NOTE}, got {number}")

	if calculator is None:
		calculator = tuna.calculator.DEFAULT_CALCULATOR

	octave = number // 12 - 1
	letter = tuna.letters.LETTERS[(number % 12 + 3) % 12]

	return calculator.note_for_letter(letter, octave)


def note_on (note: tuna.notes.Note, velocity: int = 100, channel: int = 0) -> mido.Message:

	"""Build a note-on message for ``note``."""

	return mido.Message("note_on", note=midi_number(note), velocity=velocity, channel=channel)


def note_off (note: tuna.notes.Note, velocity: int = 0, channel: int = 0) -> mido.Message:

	"""Build a note-off message for ``note``."""

	return mido.Message("note_off", note=midi_number(note), velocity=velocity, channel=channel)
