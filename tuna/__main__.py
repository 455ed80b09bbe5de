import argparse
import logging
import os
import sys
import typing

import yaml

import tuna.calculator
import tuna.frequency_validator
import tuna.pitch


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_calculator (config: dict) -> tuna.calculator.PitchCalculator:

	"""
	Build a calculator from the ``standard`` and ``frequency_range`` config sections.
	"""

	standard_config = config.get('standard', {}) or {}
	range_config = config.get('frequency_range', {}) or {}

	standard = tuna.calculator.Standard(
		frequency=float(standard_config.get('frequency', 440.0)),
		octave=int(standard_config.get('octave', 4))
	)

	validator = tuna.frequency_validator.FrequencyValidator(
		minimum=float(range_config.get('minimum', tuna.frequency_validator.DEFAULT_MINIMUM_FREQUENCY)),
		maximum=float(range_config.get('maximum', tuna.frequency_validator.DEFAULT_MAXIMUM_FREQUENCY))
	)

	return tuna.calculator.PitchCalculator(standard, validator)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Log the nearest note for each frequency given on the command line.
	"""

	parser = argparse.ArgumentParser(description="Show the nearest note for each frequency")
	parser.add_argument("frequency", nargs="*", help="Frequencies in Hz")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	args = parser.parse_args(argv)

	calculator = build_calculator(load_config(args.config))

	bounds = calculator.index_bounds
	octaves = calculator.octave_bounds
	logger.info(f"Reference {calculator.standard.frequency} Hz, index bounds {bounds.lower}..{bounds.upper}, octaves {octaves.lower}..{octaves.upper}")

	status = 0

	for arg in args.frequency:

		try:
			pitch = tuna.pitch.pitch_for_frequency(float(arg), calculator)
		except ValueError as exc:
			logger.error(f"{arg}: {exc}")
			status = 1
			continue

		offset = pitch.closest_offset
		logger.info(f"{arg} Hz -> {offset.note.name} ({offset.note.frequency:.2f} Hz, {offset.cents:+.1f} cents)")

	return status


if __name__ == "__main__":
	sys.exit(main())
