"""CPU manufacturer and micro-architecture codename from cpuid output."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

_SYNTH_PREFIX = "(synth)"
_CONSTRUCTOR_RE = re.compile(r"AMD|Intel")
_CODENAME_RE = re.compile(r"\(.*?\)")


class CpuInfoError(Exception):
    """Raised when CPU information cannot be determined."""


@dataclass(frozen=True)
class CpuInfo:
    """CPU manufacturer and codename, both lower case."""

    constructor: str
    codename: str

    @classmethod
    def from_output(cls, text):
        """Parse the output of the cpuid tool; the last "(synth)" line wins."""
        synth_lines = [
            line.lstrip()
            for line in text.strip().split("\n")
            if line.lstrip().startswith(_SYNTH_PREFIX)
        ]
        if not synth_lines:
            raise CpuInfoError("cpu info not found")
        cpu = synth_lines[-1][len(_SYNTH_PREFIX):].strip()

        constructor = _CONSTRUCTOR_RE.search(cpu)
        if constructor is None:
            raise CpuInfoError("Unknown CPU constructor")
        codename = _CODENAME_RE.search(cpu)
        if codename is None:
            raise CpuInfoError("Impossible to parse codename")
        return cls(
            constructor=constructor.group(0).lower(),
            codename=codename.group(0)[1:-1].lower(),
        )

    @classmethod
    def from_system(cls):
        """Run cpuid and parse its output."""
        try:
            result = subprocess.run(["cpuid"], capture_output=True, check=False)
        except OSError as exc:
            raise CpuInfoError(str(exc)) from exc
        return cls.from_output(result.stdout.decode("utf-8", errors="replace"))