import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス（形式: name@domain.com）"""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(.+)@(.+)\.com$")

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip() if self.value else ""
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
