import logging

import mido

import tuna
import tuna.midi

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Frequencies as a pitch detector might report them while a singer glides
# up from a flat G3 to a slightly sharp D4.
DETECTED = [194.2, 196.5, 207.1, 219.0, 233.8, 247.9, 262.4, 276.0, 294.9, 10.0]

calculator = tuna.PitchCalculator()

midi_file = mido.MidiFile()
track = mido.MidiTrack()
midi_file.tracks.append(track)

for frequency in DETECTED:

	try:
		pitch = tuna.pitch_for_frequency(frequency, calculator)
	except tuna.InvalidFrequency as exc:
		logger.warning(f"Skipping {frequency} Hz: {exc}")
		continue

	offset = pitch.closest_offset
	logger.info(f"{frequency:7.1f} Hz  {offset.note.name:<4} {offset.cents:+6.1f} cents")

	track.append(tuna.midi.note_on(offset.note, velocity=80))
	track.append(tuna.midi.note_off(offset.note).copy(time=240))

midi_file.save("tuner_readout.mid")
logger.info("Wrote tuner_readout.mid")
