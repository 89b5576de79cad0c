# -*- coding: utf-8 -*-
"""
Minimal timestamped console logger for the CLI and batch reports.
DEBUG lines are dropped unless set_verbose(True) was called.
"""
import sys, time

_VERBOSE = False

def _stamp() -> str:
    return time.strftime('%H:%M:%S')

def set_verbose(on: bool) -> None:
    global _VERBOSE
    _VERBOSE = bool(on)

def debug(msg: str):
    if _VERBOSE:
        print(f"[{_stamp()}] DEBUG: {msg}", file=sys.stderr)

def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)
def warn(msg: str):  print(f"[{_stamp()}] WARNING: {msg}", file=sys.stderr)
def error(msg: str): print(f"[{_stamp()}] ERROR: {msg}", file=sys.stderr)
