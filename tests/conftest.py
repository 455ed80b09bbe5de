import pytest

import tuna.calculator
import tuna.frequency_validator


@pytest.fixture
def calculator () -> tuna.calculator.PitchCalculator:

	"""Calculator with the default A4 = 440 Hz reference and C0..C8 range."""

	return tuna.calculator.PitchCalculator()


@pytest.fixture
def tuner_calculator () -> tuna.calculator.PitchCalculator:

	"""Calculator limited to the 20 Hz..4190 Hz range of a typical tuner."""

	validator = tuna.frequency_validator.FrequencyValidator(minimum=20.0, maximum=4190.0)

	return tuna.calculator.PitchCalculator(validator=validator)
