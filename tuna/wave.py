"""Physical properties of a sound wave at a given frequency."""

import dataclasses
import typing


SPEED_OF_SOUND = 343.0  # m/s in dry air at 20 °C


@dataclasses.dataclass(frozen=True)
class AcousticWave:

	"""
	A periodic wave travelling at ``speed`` metres per second.
	"""

	frequency: float
	speed: float = SPEED_OF_SOUND


	def __post_init__ (self) -> None:

		if self.frequency <= 0:
			raise ValueError(f"frequency must be positive, got {self.frequency}")

		if self.speed <= 0:
			raise ValueError(f"speed must be positive, got {self.speed}")


	@property
	def wavelength (self) -> float:

		"""Wavelength in metres."""

		return self.speed / self.frequency


	@property
	def period (self) -> float:

		"""Duration of one cycle in seconds."""

		return 1.0 / self.frequency


	def harmonics (self, count: int = 16) -> typing.List[float]:

		"""Return the first ``count`` harmonics, starting with the fundamental."""

		if count < 0:
			raise ValueError(f"count must not be negative, got {count}")

		return [self.frequency * n for n in range(1, count + 1)]
