"""Detect computer identity, disks, peripherals, CPU and graphics hardware on Linux."""

__version__ = "1.0.0"
__all__ = ["computer_info", "cpu_info", "vga_info"]