"""Utility helpers for pximage."""

from .param_check import check_all_positive, check_int_in_range

__all__ = ["check_all_positive", "check_int_in_range"]
