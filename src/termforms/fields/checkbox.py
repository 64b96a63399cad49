"""
Estado de un campo checkbox.
"""

from dataclasses import dataclass


@dataclass
class CheckboxState:
    checked: bool = False

    def toggle(self) -> bool:
        self.checked = not self.checked
        return True
