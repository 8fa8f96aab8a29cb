"""Home Controller - wires devices, scheduler and sensor, executes commands"""

from smart_home_sim.components import (
    DeviceType,
    EnvironmentSensor,
    create_device,
    create_temperature_mode,
)
from smart_home_sim.controllers.device_controller import DeviceController
from smart_home_sim.controllers.scheduler import Scheduler
from smart_home_sim.exceptions import (
    ConfigurationError,
    InvalidInputError,
    SmartHomeError,
)
from smart_home_sim.mqtt_publisher import MQTTBatchPublisher
from smart_home_sim.observers import DeviceLogger, StatePublisher
from smart_home_sim.scheduling import create_strategy
from smart_home_sim.simulators import TemperatureDrift

SCHEDULE_USAGE = "Usage: schedule <device> <on|off> <one-time|periodic|delayed> <seconds>"
MODE_USAGE = "Usage: mode <thermostat> <eco|comfort>"


class HomeController:
    """
    Controller for the simulated home.

    Owns the simulated clock. Time only advances through `tick`; every step
    runs one scheduler evaluation.
    """

    def __init__(self, settings):
        if not isinstance(settings, dict):
            raise ConfigurationError("Settings must be a JSON object")
        self.settings = settings
        self.device_info = self._section("device")
        sensor_cfg = self._section("sensor")
        logger_cfg = self._section("logger")

        self.current_time = 0
        self.apply_policy_on_sensor = bool(sensor_cfg.get("apply_policy", True))
        self.auto_subscribe = bool(sensor_cfg.get("auto_subscribe", True))
        self.default_mode = sensor_cfg.get("default_mode", "eco")

        self.devices = DeviceController()
        self.scheduler = Scheduler(self.devices.get_device)
        self.sensor = EnvironmentSensor(sensor_cfg.get("code", "ENV"))

        try:
            self.simulator = TemperatureDrift(sensor_cfg.get("simulate") or {})
            max_entries = int(logger_cfg.get("max_entries", 100))
        except (AttributeError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from None
        if max_entries < 1:
            raise ConfigurationError("logger.max_entries must be at least 1")

        self.logger = DeviceLogger(
            max_entries=max_entries,
            echo=bool(logger_cfg.get("echo", True)),
            clock=self.get_time,
        )
        self.publisher = MQTTBatchPublisher(self._section("mqtt"), self.device_info)
        self.state_publisher = StatePublisher(self.publisher, clock=self.get_time)

        self._init_components()

    def _section(self, key):
        value = self.settings.get(key) or {}
        if not isinstance(value, dict):
            raise ConfigurationError(f"Settings section '{key}' must be an object")
        return value

    # ========== INIT ==========

    def _init_components(self):
        print("=" * 50)
        print(f"Initializing {self.device_info.get('name', 'Smart Home')}...")
        print("=" * 50)

        entries = self.settings.get("devices") or []
        if not isinstance(entries, list):
            raise ConfigurationError("Settings 'devices' must be a list")

        for entry in entries:
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Bad device entry {entry!r}: expected an object")
            try:
                self.add_device(
                    entry.get("type"),
                    entry.get("name"),
                    mode=entry.get("mode"),
                    subscribe=entry.get("sensor"),
                )
            except InvalidInputError as exc:
                raise ConfigurationError(f"Bad device entry {entry!r}: {exc}") from exc

        print("=" * 50)

    def get_time(self):
        return self.current_time

    # ========== OPERATIONS ==========

    def add_device(self, type_name, name, mode=None, subscribe=None):
        device = create_device(type_name, name)
        if device.supports_temperature_mode:
            device.set_temperature_mode(create_temperature_mode(mode or self.default_mode))

        self.devices.add_device(device)
        device.attach(self.logger)
        device.attach(self.state_publisher)

        if subscribe is None:
            subscribe = self.auto_subscribe
        if subscribe:
            self.sensor.subscribe(device)

        print(f"[SYSTEM] {device.type_name} \"{device.name}\" added successfully.")
        return device

    def toggle(self, name):
        device = self.devices.require_device(name)
        device.toggle()
        return device

    def trigger_sensor(self, value=None):
        """Broadcast a reading; without a value the simulator provides one"""
        if value is None:
            value = self.simulator.next_reading()
        else:
            value = parse_int(value, "Sensor value")

        self.sensor.trigger(value)

        if self.apply_policy_on_sensor:
            for device in self.sensor.subscribers:
                if device.supports_temperature_mode and device.is_on():
                    device.apply_temperature_policy()
        return value

    def schedule(self, device_name, state, keyword, seconds):
        turn_on = parse_state(state)
        strategy = create_strategy(keyword, seconds)
        task = self.scheduler.add_task(device_name, turn_on, strategy)
        print(f"[SCHEDULER] Task added: {task.describe()}")
        return task

    def tick(self, steps=1):
        if steps < 1:
            raise InvalidInputError("Tick count must be at least 1.")
        for _ in range(steps):
            self.current_time += 1
            print(f"[CLOCK] Time: {self.current_time}s")
            self.scheduler.update(self.current_time)
            self.publisher.flush(self.current_time)
        return self.current_time

    def reset(self):
        self.scheduler.clear_tasks()
        self.current_time = 0
        print("[CLOCK] Time reset to 0s")

    def set_mode(self, name, keyword):
        device = self.devices.require_device(name)
        if not device.supports_temperature_mode:
            raise InvalidInputError(f"{device.type_name} \"{name}\" has no temperature mode.")
        device.set_temperature_mode(create_temperature_mode(keyword))
        print(f"[THERMOSTAT] {device.name} set to {device.mode.label}")
        return device

    # ========== CONTROL ==========

    def start(self):
        self.publisher.start()

    def cleanup(self):
        self.publisher.stop(self.current_time)

    # ========== STATUS ==========

    def get_status(self):
        devices = []
        for device in self.devices:
            entry = {
                "name": device.name,
                "type": device.type_name,
                "state": device.state_label(),
            }
            if device.supports_temperature_mode:
                entry["mode"] = device.mode.key if device.mode else None
            devices.append(entry)
        return {
            "time": self.current_time,
            "devices": devices,
            "pending_tasks": len(self.scheduler.pending()),
        }

    def get_tasks(self):
        return [task.describe() for task in self.scheduler.tasks]

    def get_logs(self):
        return self.logger.get_logs()

    def show_status(self):
        status = self.get_status()
        print("\n" + "=" * 40)
        print(f"STATUS  (time {status['time']}s)")
        print("=" * 40)
        for entry in status["devices"]:
            line = f"  [{entry['type']:<10}] {entry['name']:<24} {entry['state']}"
            if entry.get("mode"):
                line += f" ({entry['mode']})"
            print(line)
        print(f"  Pending tasks: {status['pending_tasks']}")
        print("=" * 40)

    def show_tasks(self):
        tasks = self.get_tasks()
        if not tasks:
            print("[SCHEDULER] No scheduled tasks.")
            return
        for index, text in enumerate(tasks, 1):
            print(f"  {index}. {text}")

    def show_logs(self):
        logs = self.get_logs()
        if not logs:
            print("[LOGGER] No activity yet.")
            return
        for entry in logs:
            print(f"  {DeviceLogger.format_entry(entry)}")

    # ========== COMMANDS ==========

    def handle_command(self, line):
        """
        Execute one console command.
        Returns True when handled, False when the operation failed, None for empty input.
        """
        line = line.strip()
        if not line:
            return None

        cmd, _, rest = line.partition(" ")
        cmd = cmd.lower()
        rest = rest.strip()

        try:
            if cmd in ("s", "list"):
                self.show_status()
            elif cmd == "logs":
                self.show_logs()
            elif cmd == "tasks":
                self.show_tasks()
            elif cmd == "add":
                self._cmd_add(rest)
            elif cmd == "sensor":
                self.trigger_sensor(rest or None)
            elif cmd == "schedule":
                self._cmd_schedule(rest)
            elif cmd == "tick":
                self.tick(parse_int(rest, "Tick count") if rest else 1)
            elif cmd == "reset":
                self.reset()
            elif cmd == "mode":
                self._cmd_mode(rest)
            else:
                self.toggle(line)
        except SmartHomeError as exc:
            print(f"[ERROR] {exc}")
            return False

        return True

    def _cmd_add(self, rest):
        parts = rest.split(maxsplit=1)
        type_name = parts[0] if parts else input("Enter device type (Light/Fan/Thermostat): ").strip()
        if DeviceType.parse(type_name) is None:
            raise InvalidInputError(
                f"Invalid device type '{type_name}'. Valid types: "
                + ", ".join(t.value for t in DeviceType) + "."
            )
        name = parts[1] if len(parts) > 1 else input("Enter device name: ").strip()
        self.add_device(type_name, name)

    def _cmd_schedule(self, rest):
        tokens = rest.split()
        if len(tokens) < 4:
            raise InvalidInputError(SCHEDULE_USAGE)
        device_name = " ".join(tokens[:-3])
        state, keyword, seconds = tokens[-3:]
        self.schedule(device_name, state, keyword, seconds)

    def _cmd_mode(self, rest):
        tokens = rest.split()
        if len(tokens) < 2:
            raise InvalidInputError(MODE_USAGE)
        self.set_mode(" ".join(tokens[:-1]), tokens[-1])


def parse_state(value):
    """'on' / 'off' (or a bool) to a bool"""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "on":
        return True
    if text == "off":
        return False
    raise InvalidInputError(f"State must be 'on' or 'off', got '{value}'")


def parse_int(value, label):
    if isinstance(value, bool):
        raise InvalidInputError(f"{label} must be an integer, got '{value}'")
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidInputError(f"{label} must be an integer, got '{value}'") from None
