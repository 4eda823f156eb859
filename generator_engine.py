"""Random number generator engine.

``GeneratorEngine`` owns one configuration and the last generated result.
Mutators validate the configuration they would produce and commit only if
it is valid, so a failed call never leaves a partial update behind.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple, Union

import sampling
from generator_config import GeneratorConfig, Mode, parse_custom_list, universe_size, validate
from generator_errors import GeneratorError, InvalidBounds
from generator_stats import GeneratorStats, compute_stats
from number_store import PathLike, read_numbers, write_numbers
from seeded_random import RandomSource

CORE_VERSION = "v1.0"

logger = logging.getLogger(__name__)

_UNSET = object()


class GeneratorEngine:
    """Generates integers from a range or a custom list.

    Args:
        rng: Source of uniform integers. Defaults to an OS-seeded
            ``RandomSource``.
        config: Starting configuration. Validated before use.
    """

    def __init__(self, rng: Optional[RandomSource] = None, config: Optional[GeneratorConfig] = None):
        config = config or GeneratorConfig()
        validate(config)
        self._config = config
        self._rng = rng or RandomSource()
        self._numbers: List[int] = []

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    # -------------------------
    # Mutators
    # -------------------------
    def _commit(self, **changes) -> None:
        candidate = replace(self._config, **changes)
        validate(candidate)
        self._config = candidate

    def set_lower_bound(self, value: int) -> None:
        if value > self._config.upper_bound:
            raise InvalidBounds(value, self._config.upper_bound)
        self._commit(lower_bound=value)

    def set_upper_bound(self, value: int) -> None:
        if value < self._config.lower_bound:
            raise InvalidBounds(self._config.lower_bound, value)
        self._commit(upper_bound=value)

    def set_bounds(self, lower: int, upper: int) -> None:
        if lower > upper:
            raise InvalidBounds(lower, upper)
        self._commit(lower_bound=lower, upper_bound=upper)

    def set_num_to_generate(self, count: int) -> None:
        if count < 0:
            raise ValueError("num_to_generate must be non-negative")
        self._commit(num_to_generate=count)

    def set_allow_duplicates(self, allow: bool) -> None:
        self._commit(allow_duplicates=bool(allow))

    def set_mode(self, mode: Union[Mode, str]) -> None:
        """Switch the sampling universe.

        The switch only happens if the configuration is valid in the new
        mode; otherwise the error is raised and the old mode is kept.
        """
        self._commit(mode=Mode(mode))

    def set_custom_list_input(self, text: str) -> None:
        """Store ``text`` and parse it into the custom list.

        The raw text is always kept for redisplay. The parsed list is only
        replaced when parsing and validation both succeed.

        Raises:
            InvalidInputFormat: A token is not an integer.
            EmptyList: Custom list mode is active and ``text`` is blank.
            TooManyNumbers: Duplicates are forbidden and the new list is
                shorter than ``num_to_generate``.
        """
        self._config = replace(self._config, custom_list_input=text)
        self._commit(custom_list=parse_custom_list(text))

    def configure(
        self,
        lower_bound=_UNSET,
        upper_bound=_UNSET,
        num_to_generate=_UNSET,
        allow_duplicates=_UNSET,
        mode=_UNSET,
        custom_list_input=_UNSET,
    ) -> GeneratorConfig:
        """Apply several changes at once; either all commit or none do.

        As with ``set_custom_list_input``, a submitted ``custom_list_input``
        is kept for redisplay even when the update is rejected.
        """
        try:
            return self._configure(
                lower_bound, upper_bound, num_to_generate, allow_duplicates, mode, custom_list_input
            )
        except GeneratorError:
            if custom_list_input is not _UNSET:
                self._config = replace(self._config, custom_list_input=custom_list_input)
            raise

    def _configure(
        self, lower_bound, upper_bound, num_to_generate, allow_duplicates, mode, custom_list_input
    ) -> GeneratorConfig:
        changes = {}
        if lower_bound is not _UNSET:
            changes["lower_bound"] = lower_bound
        if upper_bound is not _UNSET:
            changes["upper_bound"] = upper_bound
        if num_to_generate is not _UNSET:
            if num_to_generate < 0:
                raise ValueError("num_to_generate must be non-negative")
            changes["num_to_generate"] = num_to_generate
        if allow_duplicates is not _UNSET:
            changes["allow_duplicates"] = bool(allow_duplicates)
        if mode is not _UNSET:
            changes["mode"] = Mode(mode)
        if custom_list_input is not _UNSET:
            changes["custom_list"] = parse_custom_list(custom_list_input)
            changes["custom_list_input"] = custom_list_input

        lower = changes.get("lower_bound", self._config.lower_bound)
        upper = changes.get("upper_bound", self._config.upper_bound)
        if lower > upper:
            raise InvalidBounds(lower, upper)
        self._commit(**changes)
        return self._config

    # -------------------------
    # Accessors
    # -------------------------
    def get_bounds(self) -> Tuple[int, int]:
        return self._config.lower_bound, self._config.upper_bound

    def get_settings(self) -> Tuple[int, bool]:
        return self._config.num_to_generate, self._config.allow_duplicates

    def get_mode(self) -> Mode:
        return self._config.mode

    def get_custom_list(self) -> Tuple[int, ...]:
        return self._config.custom_list

    def get_custom_list_input(self) -> str:
        return self._config.custom_list_input

    def get_numbers(self) -> Tuple[int, ...]:
        return tuple(self._numbers)

    def get_core_version(self) -> str:
        return CORE_VERSION

    def get_stats(self) -> GeneratorStats:
        return compute_stats(self._numbers)

    stats = get_stats

    # -------------------------
    # Generation
    # -------------------------
    def generate(self) -> Tuple[int, ...]:
        """Replace the stored result with a fresh draw.

        When duplicates are forbidden and the request is sparse, the
        numbers come back in set iteration order: callers must not rely on
        their order.

        Raises:
            InvalidBounds, EmptyList, TooManyNumbers: The configuration
                cannot generate. The stored result is left untouched.
        """
        config = self._config
        validate(config)

        count = config.num_to_generate
        if config.mode is Mode.CUSTOM_LIST:
            numbers = sampling.sample_list(config.custom_list, count, config.allow_duplicates, self._rng)
        else:
            numbers = sampling.sample_range(
                config.lower_bound, config.upper_bound, count, config.allow_duplicates, self._rng
            )

        if logger.isEnabledFor(logging.DEBUG):
            strategy = (
                "independent"
                if config.allow_duplicates
                else sampling.pick_strategy(count, universe_size(config))
            )
            logger.debug(
                "Generated %d numbers (mode=%s, strategy=%s)", len(numbers), config.mode.value, strategy
            )

        self._numbers = numbers
        return tuple(numbers)

    def clear(self) -> None:
        self._numbers = []

    # -------------------------
    # Persistence
    # -------------------------
    def save(self, path: PathLike) -> None:
        """Write the current result to ``path``, one integer per line.

        Saving an empty result does nothing and does not touch the file;
        callers that want to reject that case check ``get_numbers()``
        first.

        Raises:
            IoError: The file cannot be written.
        """
        if not self._numbers:
            return
        write_numbers(path, self._numbers)
        logger.info("Saved %d numbers to %s", len(self._numbers), path)

    def load(self, path: PathLike) -> Tuple[int, ...]:
        """Replace the current result with the integers stored at ``path``.

        Raises:
            IoError: The file cannot be read.
            DataFormatError: A line is not an integer. The current result
                is left untouched.
        """
        numbers = read_numbers(path)
        self._numbers = numbers
        logger.info("Loaded %d numbers from %s", len(numbers), path)
        return tuple(numbers)
