"""Machine identity (DMI), storage and peripheral detection from sysfs."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

HARDWARE_VENDOR_REPLACEMENT = (
    ("Hewlett-Packard", "hp"),
    ("Hewlett Packard", "hp"),
)

FAMILY_EXCEPTION_RULES = {
    "framework": {
        "13in laptop": "13inch",
        "16in laptop": "16inch",
    },
}

DEFAULT_SYSFS_ROOT = "/sys"
_BLOCK_PREFIXES = ("sd", "nvme")


class ComputerInfoError(Exception):
    """Raised when machine information cannot be gathered."""


def normalize_vendor(vendor):
    """Map a raw DMI vendor string to its short lower-case name."""
    vendor = vendor.strip()
    for pattern, replacement in HARDWARE_VENDOR_REPLACEMENT:
        if vendor in pattern:
            return replacement
    return vendor.lower()


def normalize_product_family(vendor, family):
    """Lower-case a product family and apply vendor-specific renames."""
    family = family.strip().lower()
    rules = FAMILY_EXCEPTION_RULES.get(vendor, {})
    return rules.get(family, family)


def list_block_devices(sysfs_root=DEFAULT_SYSFS_ROOT):
    """Return the names of SATA/SCSI and NVMe block devices, sorted."""
    block_dir = Path(sysfs_root) / "block"
    return sorted(
        entry.name
        for entry in block_dir.iterdir()
        if entry.name.startswith(_BLOCK_PREFIXES)
    )


def _non_empty_dir(path):
    try:
        return path.is_dir() and any(path.iterdir())
    except OSError:
        return False


def has_iio_device(sysfs_root=DEFAULT_SYSFS_ROOT):
    """Whether any industrial I/O device (sensors) is present."""
    return _non_empty_dir(Path(sysfs_root) / "bus" / "iio" / "devices")


def has_fingerprint_device():
    """Whether lsusb lists a fingerprint reader."""
    try:
        result = subprocess.run(["lsusb"], capture_output=True, check=False)
    except OSError:
        return False
    stdout = result.stdout.decode("utf-8", errors="replace")
    return any("fingerprint" in line.lower() for line in stdout.strip().split("\n"))


def is_laptop(sysfs_root=DEFAULT_SYSFS_ROOT):
    """Whether the machine exposes any power supply (battery or adapter)."""
    return _non_empty_dir(Path(sysfs_root) / "class" / "power_supply")


def _read_dmi(path, what):
    try:
        return path.read_text().strip()
    except OSError as exc:
        raise ComputerInfoError(f"Impossible to get {what} : {exc}") from exc


@dataclass(frozen=True)
class ComputerInfo:
    """Identity and storage layout of the running machine."""

    vendor: str
    product_family: str
    product_name: str
    disks: tuple = ()
    sysfs_root: str = field(default=DEFAULT_SYSFS_ROOT, compare=False)

    @classmethod
    def from_system(cls, sysfs_root=DEFAULT_SYSFS_ROOT):
        """Read DMI data and block devices below *sysfs_root*."""
        root = Path(sysfs_root)
        dmi = root / "devices" / "virtual" / "dmi" / "id"
        vendor = normalize_vendor(_read_dmi(dmi / "sys_vendor", "vendor"))
        family = normalize_product_family(
            vendor, _read_dmi(dmi / "product_family", "product family")
        )
        name = _read_dmi(dmi / "product_name", "product name").lower()
        try:
            disks = tuple(list_block_devices(root))
        except OSError as exc:
            raise ComputerInfoError("Error reading block devices") from exc
        return cls(
            vendor=vendor,
            product_family=family,
            product_name=name,
            disks=disks,
            sysfs_root=str(root),
        )

    def _rotational(self, device):
        path = Path(self.sysfs_root) / "block" / device / "queue" / "rotational"
        try:
            return path.read_text().strip()
        except OSError as exc:
            raise ComputerInfoError("Impossible to read disk info") from exc

    def has_hdd(self):
        """Whether any disk is rotational."""
        return any(self._rotational(device) == "1" for device in self.disks)

    def has_ssd(self):
        """Whether any disk is non-rotational."""
        return any(self._rotational(device) == "0" for device in self.disks)