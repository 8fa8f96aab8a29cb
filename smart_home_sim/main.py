#!/usr/bin/env python3
"""
Smart Home Simulator - interactive console
"""

import sys

from smart_home_sim.controllers import HomeController
from smart_home_sim.exceptions import ConfigurationError
from smart_home_sim.settings import load_settings


def show_help():
    """Display help menu"""
    print("""
==================================================
COMMANDS
==================================================
  <device name>        Toggle device
  add [type] [name]    Add Light / Fan / Thermostat
  mode <thermostat> <eco|comfort>

  SIMULATION:
  sensor [value]       Broadcast reading (random if omitted)
  schedule <device> <on|off> <one-time|periodic|delayed> <seconds>
  tick [n]             Advance time by 1s (n times)
  reset                Clear tasks, time -> 0

  list / s - Status    tasks - Tasks    logs - Activity
  h - Help             q - Quit
==================================================""")


def main(argv=None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv

    print("\n" + "=" * 50)
    print("  SMART HOME SIMULATOR")
    print("=" * 50 + "\n")

    try:
        settings = load_settings(argv[0]) if argv else load_settings()
        controller = HomeController(settings)
    except ConfigurationError as e:
        print(f"[ERROR] {e}")
        return 1

    controller.start()
    print("\n[SYSTEM] Running...  (press 'h' for help)\n")
    show_help()

    running = True
    while running:
        try:
            cmd = input("\n> ").strip()

            if not cmd:
                continue
            elif cmd.lower() in ('h', 'help'):
                show_help()
            elif cmd.lower() in ('q', 'quit', 'exit'):
                running = False
                print("\nExiting...")
            else:
                controller.handle_command(cmd)

        except (KeyboardInterrupt, EOFError):
            running = False
            print("\n\nExiting...")

    controller.cleanup()
    print("[SYSTEM] Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
