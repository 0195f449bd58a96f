"""ActionRunner interface - shell side effects go here."""

import os
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class ActionRunner(ABC):
    """Interface for executing side effects."""

    @abstractmethod
    def run_shell(self, command: List[str], cwd: Optional[str] = None) -> Dict[str, Any]:
        """Execute shell command.

        Returns:
            Dict with 'stdout', 'stderr' and 'returncode'
        """
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Check if file exists at given path."""
        pass


class RealActionRunner(ActionRunner):
    """Real implementation - actually does things."""

    def run_shell(self, command: List[str], cwd: Optional[str] = None) -> Dict[str, Any]:
        try:
            result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
        except FileNotFoundError as e:
            return {
                'stdout': '',
                'stderr': f"FileNotFoundError: {e}",
                'returncode': 127  # Standard "command not found" exit code
            }
        return {
            'stdout': result.stdout,
            'stderr': result.stderr,
            'returncode': result.returncode
        }

    def file_exists(self, path: str) -> bool:
        return os.path.exists(path)


class MockActionRunner(ActionRunner):
    """Mock for testing - records calls."""

    def __init__(self):
        self.calls = []
        self.responses = {}

    def run_shell(self, command: List[str], cwd: Optional[str] = None) -> Dict[str, Any]:
        self.calls.append(('run_shell', command, cwd))

        # Responses keyed by the command tuple
        response = self.responses.get('run_shell', {}).get(tuple(command))
        if response is not None:
            return response

        return {'stdout': '', 'stderr': '', 'returncode': 0}

    def file_exists(self, path: str) -> bool:
        self.calls.append(('file_exists', path))
        return self.responses.get('file_exists', {}).get(path, False)
