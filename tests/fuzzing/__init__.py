"""Randomized law checks for hofkit."""

from .fuzz import FuzzResult, FuzzRunner, Fuzzer, random_element, run_suite

__all__ = ["Fuzzer", "FuzzResult", "FuzzRunner", "random_element", "run_suite"]
