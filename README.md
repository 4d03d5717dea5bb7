# system_info

A small library that reports the hardware of a Linux machine. It reads sysfs
and the output of the `lspci`, `lsusb` and `cpuid` tools.

## Installation

```
pip install .
```

The library needs only the standard library at run time. Hardware detection
expects a Linux system with `/sys` mounted. The `lspci`, `lsusb` and `cpuid`
tools must be installed for the checks that use them.

## Computer

```python
from system_info.computer_info import (
    ComputerInfo,
    has_fingerprint_device,
    has_iio_device,
    is_laptop,
)

info = ComputerInfo.from_system()
print(info.vendor, info.product_family, info.product_name)
print(info.disks)                     # e.g. ("nvme0n1", "sda")
print("HDD:", info.has_hdd(), "SSD:", info.has_ssd())
print("laptop:", is_laptop(), "sensors:", has_iio_device())
print("fingerprint:", has_fingerprint_device())
```

`ComputerInfo.from_system` reads the DMI vendor, product family and product
name from `devices/virtual/dmi/id` and lists the block devices under `block`.
Vendor names are normalised. "Hewlett-Packard" and "Hewlett Packard" both
become `hp`, and every other vendor is lower-cased. Product families are
lower-cased too, and Framework families are renamed: "13in laptop" becomes
`13inch` and "16in laptop" becomes `16inch`. You can also apply these rules to
strings you supply, with `normalize_vendor(vendor)` and
`normalize_product_family(vendor, family)`.

`list_block_devices` returns the sorted names of the `sd*` and `nvme*`
devices. `has_hdd` and `has_ssd` check each disk's `queue/rotational` flag.
`is_laptop` reports whether `class/power_supply` holds any entry, and
`has_iio_device` reports whether `bus/iio/devices` holds any entry.
`has_fingerprint_device` looks for "fingerprint" in the `lsusb` output. It
returns `False` when `lsusb` cannot be run.

`from_system`, `list_block_devices`, `is_laptop` and `has_iio_device` accept
an optional `sysfs_root`, which defaults to `/sys`. Use it to point them at a
copied or mocked sysfs tree. Reading the DMI files, the block devices or a
disk's rotational flag raises `ComputerInfoError` on failure.

## CPU

```python
from system_info.cpu_info import CpuInfo

cpu = CpuInfo.from_system()            # runs `cpuid`
print(cpu.constructor, cpu.codename)
```

The parser uses the last `(synth)` line of the `cpuid` output. `constructor`
holds `amd` or `intel`. `codename` holds the first parenthesised text on that
line, lower-cased. `CpuInfo.from_output(text)` parses `cpuid` output you have
already captured. `CpuInfoError` is raised when `cpuid` cannot be run, when
there is no `(synth)` line, when the manufacturer is unknown, or when there is
no codename.

## Graphics

```python
from system_info.vga_info import VgaInfo

vga = VgaInfo.from_system()            # runs `lspci`
for device in vga.devices:
    print(device.pci_address, device.description)   # e.g. "PCI:1:0:0"

print(vga.has_nvidia_device(), vga.has_nvidia_laptop())
print(vga.nvidia_generation())         # e.g. "ampere"
print(vga.match_architecture_codename("navi"))
```

Only "VGA compatible controller" and "3D controller" lines are kept. Each
becomes a `VgaDevice` with an X.org style `pci_address` and its description.
`convert_to_pci_format("01:00.0")` returns `"PCI:1:0:0"`.
`parse_lspci_output(text)` and `VgaInfo.from_output(text)` work on captured
`lspci` output.

`has_nvidia_laptop` is true for an NVIDIA adapter whose description mentions
"laptop" or "mobile", or contains a model such as `940M`.
`nvidia_generation` finds the architecture from chipset names such as `GA106`
or `AD107M`. It covers fermi through blackwell and returns the newest
architecture present. `match_architecture_codename` is a case-insensitive
substring search over the descriptions.

`VgaInfoError` is raised in these cases:
- `lspci` cannot be run.
- An address is malformed.
- `nvidia_generation` finds no NVIDIA chipset.

## What it does not do

This is a library only. It installs no command-line tool, and it does not
store or export the information it gathers.