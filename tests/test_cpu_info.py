import subprocess
from unittest import mock

import pytest

from system_info.cpu_info import CpuInfo, CpuInfoError

SAMPLE = """CPU 0:
   vendor_id = "AuthenticAMD"
   (synth) = AMD Ryzen 5 (Renoir) 7nm
CPU 1:
   vendor_id = "AuthenticAMD"
   (synth) = AMD Ryzen 7 (Cezanne) 7nm
"""


def test_from_output_uses_last_synth_line():
    info = CpuInfo.from_output(SAMPLE)
    assert info.constructor == "amd"
    assert info.codename == "cezanne"


def test_from_output_intel_first_parenthesis():
    info = CpuInfo.from_output("  (synth) = Intel Core (Tiger Lake) (Willow Cove)\n")
    assert info.constructor == "intel"
    assert info.codename == "tiger lake"


def test_from_output_no_synth():
    with pytest.raises(CpuInfoError, match="cpu info not found"):
        CpuInfo.from_output("vendor_id = \"GenuineIntel\"\n")


def test_from_output_unknown_constructor():
    with pytest.raises(CpuInfoError):
        CpuInfo.from_output("(synth) = Example CPU (Something)\n")


def test_from_output_no_codename():
    with pytest.raises(CpuInfoError):
        CpuInfo.from_output("(synth) = Intel Core i5\n")


def test_from_system_parses_cpuid():
    completed = subprocess.CompletedProcess(
        ["cpuid"], 0, stdout=SAMPLE.encode(), stderr=b""
    )
    with mock.patch("system_info.cpu_info.subprocess.run", return_value=completed):
        info = CpuInfo.from_system()
    assert info == CpuInfo.from_output(SAMPLE)


def test_from_system_without_cpuid():
    with mock.patch(
        "system_info.cpu_info.subprocess.run",
        side_effect=FileNotFoundError("cpuid missing"),
    ):
        with pytest.raises(CpuInfoError, match="cpuid missing"):
            CpuInfo.from_system()