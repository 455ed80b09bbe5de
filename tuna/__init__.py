"""
Tuna - pitch arithmetic for tuners and pitch detectors.

Tuna converts between three equivalent descriptions of a musical pitch:

- a **pitch index**, the signed number of semitones from a reference pitch
  (A4 = 440 Hz by default),
- a **letter and octave**, such as ``C#5``,
- a **frequency** in Hz.

Conversions are validated against a frequency range (C0..C8 by default);
the index and octave bounds follow from it. A measured frequency can be
placed between its two nearest notes with cent and percentage offsets, and
notes convert to MIDI note numbers and ``mido`` messages.

Minimal example:

    ```python
    import tuna

    calculator = tuna.PitchCalculator()
    calculator.index_for_frequency(880.0)         # 12
    calculator.note_for_index(-9).name            # "C4"

    pitch = tuna.pitch_for_frequency(445.0)
    pitch.closest_offset.cents                    # 19.56...
    ```

Package-level exports: ``PitchCalculator``, ``Standard``, ``FrequencyValidator``,
``Letter``, ``Note``, ``pitch_for_frequency`` and the error classes.
"""

import tuna.calculator
import tuna.errors
import tuna.frequency_validator
import tuna.letters
import tuna.notes
import tuna.pitch


PitchCalculator = tuna.calculator.PitchCalculator
Standard = tuna.calculator.Standard
FrequencyValidator = tuna.frequency_validator.FrequencyValidator
Letter = tuna.letters.Letter
Note = tuna.notes.Note
pitch_for_frequency = tuna.pitch.pitch_for_frequency

PitchError = tuna.errors.PitchError
InvalidFrequency = tuna.errors.InvalidFrequency
InvalidPitchIndex = tuna.errors.InvalidPitchIndex
InvalidOctave = tuna.errors.InvalidOctave
