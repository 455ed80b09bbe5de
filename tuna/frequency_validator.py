"""The range of frequencies the calculator accepts.

The defaults span C0 (16.35 Hz) to C8 (4186.01 Hz). Each bound sits just
outside the grid frequency of the note it rounds to, so every index inside
the derived bounds converts to a frequency this validator still accepts.
"""

import dataclasses

import tuna.errors


DEFAULT_MINIMUM_FREQUENCY = 16.35
DEFAULT_MAXIMUM_FREQUENCY = 4186.01


@dataclasses.dataclass(frozen=True)
class FrequencyValidator:

	"""
	Closed frequency range, in Hz.
	"""

	minimum: float = DEFAULT_MINIMUM_FREQUENCY
	maximum: float = DEFAULT_MAXIMUM_FREQUENCY


	def __post_init__ (self) -> None:

		if self.minimum <= 0:
			raise ValueError(f"minimum frequency must be positive, got {self.minimum}")

		if self.minimum > self.maximum:
			raise ValueError(
				f"minimum frequency {self.minimum} is above maximum frequency {self.maximum}"
			)


	def is_valid (self, frequency: float) -> bool:

		"""Return True when ``frequency`` is positive and within the range."""

		return frequency > 0 and self.minimum <= frequency <= self.maximum


	def validate (self, frequency: float) -> None:

		"""Raise ``InvalidFrequency`` unless ``frequency`` is valid."""

		if not self.is_valid(frequency):
			raise tuna.errors.InvalidFrequency(
				f"Frequency {frequency} Hz is outside {self.minimum}..{self.maximum} Hz"
			)
