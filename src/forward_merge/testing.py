"""Test doubles for code built on this package.

``MockCore`` stands in for ``ActionCore`` so tests can supply inputs and
inspect what an action logged, published or failed with.
"""

from __future__ import annotations


class MockCore:
    """Records every call an action makes against the runner."""

    def __init__(self, inputs: dict[str, str] | None = None) -> None:
        self.inputs = dict(inputs or {})
        self.info_msgs: list[str] = []
        self.debug_msgs: list[str] = []
        self.warning_msgs: list[str] = []
        self.error_msgs: list[str] = []
        self.outputs: dict[str, object] = {}
        self.error_arg: object = None
        self.failed_arg: object = None
        self.exit_code = 0

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.inputs.get(name, "")
        if required and not value:
            raise ValueError(f"Input required and not supplied: {name}")
        return value

    def debug(self, message: object) -> None:
        self.debug_msgs.append(str(message))

    def info(self, message: object) -> None:
        self.info_msgs.append(str(message))

    def warning(self, message: object) -> None:
        self.warning_msgs.append(str(message))

    def error(self, message: object) -> None:
        self.error_arg = message
        self.error_msgs.append(str(message))

    def set_output(self, name: str, value: object) -> None:
        self.outputs[name] = value

    def set_failed(self, message: object) -> None:
        self.failed_arg = message
        self.exit_code = 1

    def start_group(self, label: str) -> None:
        self.info_msgs.append(f"\n{label}\n===============================================\n")

    def end_group(self) -> None:
        pass
