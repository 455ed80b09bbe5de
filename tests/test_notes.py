import pytest

import tuna.calculator
import tuna.errors
import tuna.letters
import tuna.notes


def test_note_for_reference_index (calculator: tuna.calculator.PitchCalculator) -> None:

	note = calculator.note_for_index(0)

	assert note.index == 0
	assert note.letter == tuna.letters.Letter.A
	assert note.octave == 4
	assert note.frequency == 440.0
	assert note.name == "A4"
	assert str(note) == "A4"


@pytest.mark.parametrize("name, index", [
	("A4", 0),
	("C4", -9),
	("C#5", 4),
	("Bb3", -11),
	("a#3", -11),
	("C0", -57),
	("C8", 39),
	(" E♭ 4 ", -6),
])
def test_parse_note (calculator: tuna.calculator.PitchCalculator, name: str, index: int) -> None:

	assert calculator.parse_note(name).index == index


def test_parse_note_frequency (calculator: tuna.calculator.PitchCalculator) -> None:

	assert calculator.parse_note("A0").frequency == 27.5


def test_parse_note_out_of_bounds (calculator: tuna.calculator.PitchCalculator) -> None:

	with pytest.raises(tuna.errors.InvalidOctave):
		calculator.parse_note("A9")

	with pytest.raises(tuna.errors.InvalidOctave):
		calculator.parse_note("B-1")

	with pytest.raises(tuna.errors.InvalidPitchIndex):
		calculator.parse_note("C#8")


@pytest.mark.parametrize("name", ["H4", "A", "4", "A4.5", "A#b4"])
def test_parse_note_rejects_malformed_names (calculator: tuna.calculator.PitchCalculator, name: str) -> None:

	with pytest.raises(ValueError):
		calculator.parse_note(name)


def test_parse_note_name_negative_octave () -> None:

	assert tuna.notes.parse_note_name("Eb-1") == (tuna.letters.Letter.D_SHARP, -1)


def test_note_for_frequency_picks_nearest (calculator: tuna.calculator.PitchCalculator) -> None:

	assert calculator.note_for_frequency(445.0).name == "A4"
	assert calculator.note_for_frequency(453.0).name == "A#4"
	assert calculator.note_for_frequency(261.0).name == "C4"


def test_note_for_frequency_out_of_range (calculator: tuna.calculator.PitchCalculator) -> None:

	with pytest.raises(tuna.errors.InvalidFrequency):
		calculator.note_for_frequency(8000.0)


def test_note_for_letter (calculator: tuna.calculator.PitchCalculator) -> None:

	note = calculator.note_for_letter(tuna.letters.Letter.C, 4)

	assert note.index == -9
	assert note.frequency == pytest.approx(261.6255653005986)


def test_lower_and_higher (calculator: tuna.calculator.PitchCalculator) -> None:

	a4 = calculator.note_for_index(0)

	assert calculator.lower(a4).name == "G#4"
	assert calculator.higher(a4).name == "A#4"
	assert calculator.higher(calculator.parse_note("B4")).name == "C5"


def test_lower_and_higher_stop_at_bounds (calculator: tuna.calculator.PitchCalculator) -> None:

	with pytest.raises(tuna.errors.InvalidPitchIndex):
		calculator.lower(calculator.parse_note("C0"))

	with pytest.raises(tuna.errors.InvalidPitchIndex):
		calculator.higher(calculator.parse_note("C8"))


def test_notes_order_by_index (calculator: tuna.calculator.PitchCalculator) -> None:

	names = ["C5", "A4", "C4", "B3"]
	notes = sorted(calculator.parse_note(name) for name in names)

	assert [note.name for note in notes] == ["B3", "C4", "A4", "C5"]
	assert calculator.parse_note("Bb4") == calculator.parse_note("A#4")


def test_every_note_name_parses_back (calculator: tuna.calculator.PitchCalculator) -> None:

	for index in calculator.index_bounds:
		note = calculator.note_for_index(index)
		assert calculator.parse_note(note.name) == note
