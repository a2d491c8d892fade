# -*- coding: utf-8 -*-

"""
Filename: main.py
Author: storro
Date: 2026-10-17
Description: Main application entry point
"""

import argparse

from src.app.hexwave_app import HexWaveApp, HexWaveConfig


def parse_args(argv=None) -> HexWaveConfig:
    parser = argparse.ArgumentParser(description="Animated hexagonal lattice")
    parser.add_argument("--cpu", action="store_true",
                        help="displace the vertex buffer with numpy instead of in the vertex shader")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", action="store_true", help="also log to logs/hexwave.log")
    args = parser.parse_args(argv)

    return HexWaveConfig(
        use_gpu_shading=not args.cpu,
        log_level=args.log_level.upper(),
        log_to_file=args.log_file,
    )


if __name__ == "__main__":
    HexWaveApp(parse_args()).run()
