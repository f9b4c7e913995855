"""
Demo report: writes the state and behavior of every mixer type to a text log.

Sections, in order:
- NumMixer, DualMixer and StackMixer operator demos (stats, copy, ==, <, +).
- StackMixer mixed-mode arithmetic (stack += NumMixer).
- Ping demos for each sampling mode and combine mode.

Filtered outputs (combine mode 4, prime-filtered stack pings) are printed at whatever
length they come out; nothing is padded.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, TypeVar, Union

import numpy as np

from number_mixers.core.seeding import (
    SALT_DRIVER_DATASET,
    SALT_DUAL_MIXER,
    SALT_NUM_MIXER,
    SALT_STACK_DATASET,
    rng_for,
    rng_from_seed,
)
from number_mixers.mixers import DualMixer, NumMixer, OutputController, StackMixer

logger = logging.getLogger(__name__)

HEADER_WIDTH = 26
STATS_BORDER_WIDTH = 28
DRIVER_DATASET_SIZE = 10
DRIVER_LOWER_BOUND = 2
DRIVER_UPPER_BOUND = 100
PING_BATCH_SIZE = 10

M = TypeVar("M", NumMixer, DualMixer, StackMixer)


@dataclass
class DriverRandom:
    """One generator per component so a seeded run reproduces section by section."""

    num_mixer: np.random.Generator
    dual_mixer: np.random.Generator
    stack_mixer: np.random.Generator
    dataset: np.random.Generator

    @classmethod
    def build(cls, seed: Optional[int] = None, run_key: Optional[str] = None) -> "DriverRandom":
        """run_key wins over seed; with neither, every generator draws from OS entropy."""
        key = run_key if run_key is not None else (None if seed is None else f"seed:{seed}")
        if key is None:
            return cls(
                num_mixer=rng_from_seed(None),
                dual_mixer=rng_from_seed(None),
                stack_mixer=rng_from_seed(None),
                dataset=rng_from_seed(None),
            )
        return cls(
            num_mixer=rng_for(key, SALT_NUM_MIXER),
            dual_mixer=rng_for(key, SALT_DUAL_MIXER),
            stack_mixer=rng_for(key, SALT_STACK_DATASET),
            dataset=rng_for(key, SALT_DRIVER_DATASET),
        )


def bool_text(b: bool) -> str:
    return "True" if b else "False"


def gen_dataset(rng: np.random.Generator, size: int = DRIVER_DATASET_SIZE) -> List[int]:
    """Random driver dataset: `size` values from [2, 100]."""
    return [int(v) for v in rng.integers(DRIVER_LOWER_BOUND, DRIVER_UPPER_BOUND + 1, size=size)]


def write_header(lines: Sequence[str], out: TextIO) -> None:
    """
    Boxed, centered header:

    ############################
    #                          #
    #          header          #
    #         subtext          #
    #                          #
    ############################
    """
    border = "#" + "#" * HEADER_WIDTH + "#"
    padding = "#" + " " * HEADER_WIDTH + "#"
    out.write(border + "\n")
    out.write(padding + "\n")
    for line in lines:
        slack = HEADER_WIDTH - len(line)
        left = max(0, math.floor(slack / 2))
        right = max(0, math.ceil(slack / 2))
        out.write("#" + " " * left + line + " " * right + "#\n")
    out.write(padding + "\n")
    out.write(border + "\n")


def write_values(values: Sequence[int], out: TextIO) -> None:
    for v in values:
        out.write(f"{v}\n")


def write_num_mixer_stats(nm: NumMixer, name: str, out: TextIO, verbose: bool = True) -> None:
    out.write(f'== "{name}" STATS ==\n')
    out.write(f"stateChangeCount: {nm.mode_change_count}\n")
    out.write(f"countDown: {nm.remaining_budget}\n")
    out.write(f"evenValid: {bool_text(nm.even_allowed)}\n")
    out.write(f"oddValid: {bool_text(nm.odd_allowed)}\n")
    if verbose:
        out.write("dataset: \n")
        write_values(nm.dataset, out)
    out.write(f"controllerState: {nm.mode_name}\n")


def write_dual_mixer_stats(dm: DualMixer, name: str, out: TextIO) -> None:
    border = "=" * STATS_BORDER_WIDTH
    out.write(border + "\n")
    out.write(f'== "{name}" STATS ==\n')
    out.write(f"ctl: {dm.combine_mode}\n")
    out.write("\n")
    write_num_mixer_stats(dm.even_mixer, "x", out, verbose=False)
    out.write("\n")
    write_num_mixer_stats(dm.odd_mixer, "z", out, verbose=False)
    out.write(border + "\n")


def write_stack_mixer_stats(sm: StackMixer, name: str, out: TextIO) -> None:
    border = "=" * STATS_BORDER_WIDTH
    out.write(border + "\n")
    out.write(f'== "{name}" STATS ==\n')
    out.write(f"Stack size: {sm.size}\n")
    for index, nm in sm.iter_top_down():
        out.write("\n")
        write_num_mixer_stats(nm, f"index [{index}]", out, verbose=False)
    out.write(border + "\n")


def write_stats(mixer: Union[NumMixer, DualMixer, StackMixer], name: str, out: TextIO) -> None:
    if isinstance(mixer, NumMixer):
        write_num_mixer_stats(mixer, name, out)
    elif isinstance(mixer, DualMixer):
        write_dual_mixer_stats(mixer, name, out)
    elif isinstance(mixer, StackMixer):
        write_stack_mixer_stats(mixer, name, out)
    else:
        raise TypeError(f"no stats writer for {type(mixer).__name__}")


def write_equality(lhs: M, lhs_name: str, rhs: M, rhs_name: str, out: TextIO) -> None:
    verdict = "the same" if lhs == rhs else "different"
    out.write(f"{lhs_name} and {rhs_name} are {verdict}\n")


def write_relation(lhs: M, lhs_name: str, rhs: M, rhs_name: str, out: TextIO) -> None:
    """< and > are not tied to ==, so "not comparable" does not imply equal."""
    if lhs < rhs:
        relation = "less than"
    elif lhs > rhs:
        relation = "greater than"
    else:
        relation = "not comparable to"
    out.write(f"{lhs_name} is {relation} {rhs_name}\n")


def demo_operators(
    mixer1: M,
    name1: str,
    mixer2: M,
    name2: str,
    class_name: str,
    out: TextIO,
) -> M:
    """Copy, print, compare and add two mixers of one type; returns the sum."""
    write_header([class_name, "Overloaded Operators"], out)
    out.write("\n")

    mixer2_copy = mixer2.copy()
    copy_name = name2 + "Copy"

    for mixer, name in ((mixer1, name1), (mixer2, name2), (mixer2_copy, copy_name)):
        write_stats(mixer, name, out)
        out.write("\n")

    write_equality(mixer1, name1, mixer2, name2, out)
    write_equality(mixer2, name2, mixer2_copy, copy_name, out)
    write_relation(mixer1, name1, mixer2, name2, out)
    out.write("\n")

    total = mixer1 + mixer2
    write_stats(total, f"{name1} + {name2}", out)
    return total


def demo_mixed_arithmetic(random: DriverRandom, out: TextIO) -> StackMixer:
    """Push a standalone NumMixer onto an empty StackMixer with +=."""
    write_header(["multiMix", "Mixed-Mode Arithmetic"], out)
    out.write("\n")

    mm1 = StackMixer(rng=random.stack_mixer)
    nm1 = NumMixer(gen_dataset(random.dataset), rng=random.num_mixer)

    write_stack_mixer_stats(mm1, "mm1", out)
    out.write("\n")
    write_num_mixer_stats(nm1, "nm1", out, verbose=False)
    out.write("\n")

    mm1 += nm1
    write_stack_mixer_stats(mm1, "mm1 += nm1", out)
    return mm1


def _ping_line(label: str, values: Sequence[int]) -> str:
    shown = " ".join(str(v) for v in values) if values else "(none)"
    return f"{label} [{len(values)}]: {shown}\n"


def demo_pings(random: DriverRandom, out: TextIO) -> None:
    """Sample every mixer type under each of its modes."""
    write_header(["Pings"], out)
    out.write("\n")

    nm = NumMixer(rng=random.num_mixer)
    for mode in OutputController:
        nm.set_mode(mode)
        result = nm.sample(PING_BATCH_SIZE)
        if result.ok:
            out.write(_ping_line(f"numMixer {mode.value}", result.values))
        else:
            out.write(f"numMixer {mode.value}: failed ({result.status.value})\n")

    evens_only = NumMixer([2, 4, 6], rng=random.num_mixer)
    evens_only.set_mode(OutputController.ODD)
    result = evens_only.sample(PING_BATCH_SIZE)
    out.write(f"numMixer [2, 4, 6] ODD: {'ok' if result.ok else 'failed'} ({result.status.value})\n")
    out.write("\n")

    dm = DualMixer(rng=random.dual_mixer)
    for ctl in (1, 2, 3, 4):
        dm.set_combine_mode(ctl)
        out.write(_ping_line(f"dubMix ctl={ctl}", dm.ping()))
    out.write("\n")

    sm = StackMixer(rng=random.stack_mixer)
    for _ in range(3):
        sm.add_mixers(1)
        values = sm.ping()
        out.write(_ping_line(f"multiMix size={sm.size} ({sm.top.mode_name})", values))


def write_report(out: TextIO, random: Optional[DriverRandom] = None) -> None:
    """Write the full demo report to an open text stream."""
    random = random or DriverRandom.build()

    nm1 = NumMixer(gen_dataset(random.dataset), rng=random.num_mixer)
    nm2 = NumMixer(gen_dataset(random.dataset), rng=random.num_mixer)
    demo_operators(nm1, "nm1", nm2, "nm2", "numMixer", out)
    out.write("\n")
    logger.info("numMixer section written")

    dm1 = DualMixer(rng=random.dual_mixer)
    dm2 = DualMixer(rng=random.dual_mixer)
    demo_operators(dm1, "dm1", dm2, "dm2", "dubMix", out)
    out.write("\n")
    logger.info("dubMix section written")

    mm1 = StackMixer(rng=random.stack_mixer)
    mm1.add_mixers(1)
    mm2 = StackMixer(rng=random.stack_mixer)
    mm2.add_mixers(2)
    demo_operators(mm1, "mm1", mm2, "mm2", "multiMix", out)
    out.write("\n")
    logger.info("multiMix section written")

    demo_mixed_arithmetic(random, out)
    out.write("\n")
    demo_pings(random, out)
    logger.info("Ping section written")


def write_report_file(path: Union[str, Path], random: Optional[DriverRandom] = None) -> Path:
    """Write the demo report to `path` (overwritten); returns the resolved path."""
    p = Path(path)
    with open(p, "w", encoding="utf-8") as f:
        write_report(f, random)
    logger.info("Report written to %s", p)
    return p.resolve()


__all__ = [
    "DriverRandom",
    "HEADER_WIDTH",
    "demo_mixed_arithmetic",
    "demo_operators",
    "demo_pings",
    "gen_dataset",
    "write_header",
    "write_num_mixer_stats",
    "write_dual_mixer_stats",
    "write_stack_mixer_stats",
    "write_report",
    "write_report_file",
]
