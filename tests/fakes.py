"""
Test doubles for the storage layer.
"""

from typing import Dict, Optional


class FakeKeyValueStore:
    """
    Dict-backed stand-in for KeyValueRepository.

    Set fail_reads / fail_writes to simulate storage I/O errors.
    """

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    async def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise OSError("simulated read failure")
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("simulated write failure")
        self.writes += 1
        self.data[key] = value

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None
