"""Graphics adapters listed by lspci, with NVIDIA-specific helpers."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

NVIDIA_GEN_CHIPSET = (
    ("GF", "fermi"),
    ("GK", "kepler"),
    ("GM", "maxwell"),
    ("GP", "pascal"),
    ("TU", "turing"),
    ("GA", "ampere"),
    ("AD", "ada-lovelace"),
    ("GB", "blackwell"),
)

_GENERATION_RANK = {code: rank for rank, (code, _) in enumerate(NVIDIA_GEN_CHIPSET)}
_GENERATION_NAME = dict(NVIDIA_GEN_CHIPSET)

_ADDRESS_SPLIT_RE = re.compile(r"[:\\.]")
_CHIPSET_RE = re.compile(
    r"\b(?:" + "|".join(code for code, _ in NVIDIA_GEN_CHIPSET) + r")\d{3}M?\b"
)
_MOBILE_MODEL_RE = re.compile(r"\b\d{3}M\b")
_LAPTOP_KEYWORDS = ("laptop", "mobile")
_KEYWORDS = (" VGA compatible controller: ", " 3D controller: ")


class VgaInfoError(Exception):
    """Raised when graphics adapter information cannot be obtained."""


@dataclass(frozen=True)
class VgaDevice:
    """A graphics adapter: its X.org style PCI address and lspci description."""

    pci_address: str
    description: str


def convert_to_pci_format(address):
    """Convert an lspci address such as "0000:01:00.0" to "PCI:1:0:0"."""
    parts = _ADDRESS_SPLIT_RE.split(address)
    if len(parts) < 3:
        raise VgaInfoError("Invalid device id")
    try:
        bus = int(parts[-3], 16)
        device = int(parts[-2], 16)
        function = int(parts[-1], 10)
    except ValueError as exc:
        raise VgaInfoError(f"Invalid device id: {address!r}") from exc
    return f"PCI:{bus}:{device}:{function}"


def parse_lspci_output(text):
    """Extract graphics adapters from lspci output."""
    devices = []
    for line in text.strip().split("\n"):
        for keyword in _KEYWORDS:
            index = line.find(keyword)
            if index < 0:
                continue
            pci_address = convert_to_pci_format(line[:index].strip())
            if pci_address:
                devices.append(VgaDevice(pci_address, line[index:].strip()))
            break
    return devices


@dataclass(frozen=True)
class VgaInfo:
    """The graphics adapters of a machine."""

    devices: tuple = ()

    @classmethod
    def from_output(cls, text):
        """Build from lspci output."""
        return cls(tuple(parse_lspci_output(text)))

    @classmethod
    def from_system(cls):
        """Run lspci and parse its output."""
        try:
            result = subprocess.run(["lspci"], capture_output=True, check=False)
        except OSError as exc:
            raise VgaInfoError("Failed to execute lspci command") from exc
        return cls.from_output(result.stdout.decode("utf-8", errors="replace"))

    def _nvidia_descriptions(self):
        return (d.description for d in self.devices if "nvidia" in d.description.lower())

    def has_nvidia_device(self):
        """Whether any adapter is an NVIDIA card."""
        return any(True for _ in self._nvidia_descriptions())

    def has_nvidia_laptop(self):
        """Whether any NVIDIA adapter looks like a mobile part."""
        for description in self._nvidia_descriptions():
            lower = description.lower()
            if any(keyword in lower for keyword in _LAPTOP_KEYWORDS):
                return True
            if _MOBILE_MODEL_RE.search(description):
                return True
        return False

    def nvidia_generation(self):
        """Architecture name of the most recent NVIDIA chipset present."""
        best = None
        for description in self._nvidia_descriptions():
            match = _CHIPSET_RE.search(description)
            if match is None:
                continue
            code = match.group(0)[:2]
            if best is None or _GENERATION_RANK[best] < _GENERATION_RANK[code]:
                best = code
        if best is None:
            raise VgaInfoError("No nvidia card")
        return _GENERATION_NAME[best]

    def match_architecture_codename(self, codename):
        """Whether any adapter description mentions *codename*, ignoring case."""
        needle = codename.lower()
        return any(needle in d.description.lower() for d in self.devices)