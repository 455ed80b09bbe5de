"""Errors raised by pitch calculations.

All three kinds share the ``PitchError`` base, which is itself a
``ValueError`` so callers that already guard against bad arguments keep
working.
"""


class PitchError (ValueError):
	pass


class InvalidFrequency (PitchError):
	pass


class InvalidPitchIndex (PitchError):
	pass


class InvalidOctave (PitchError):
	pass
