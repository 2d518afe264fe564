"""
Credential gate.

Decides whether the generative backend is usable before any generation
feature is offered. Missing key, rejected key and network failure all
collapse into the same `unavailable` state here; finer distinctions are
only made by the generation calls themselves.
"""

from typing import Literal

from rich.console import Console
from rich.markup import escape

from .providers import GenerativeProvider

console = Console(stderr=True)

GateState = Literal["unknown", "available", "unavailable"]


class CredentialGate:
    """Tracks whether the backend can be used."""

    PROBE_PROMPT = "ping"

    def __init__(self, provider: GenerativeProvider):
        self.provider = provider
        self.state: GateState = "unknown"

    @property
    def is_available(self) -> bool:
        return self.state == "available"

    async def check_capability(self) -> bool:
        """Probe the backend with a one-token request.

        Never raises. Any failure leaves the gate `unavailable`.
        """
        if not self.provider.has_credential:
            self.state = "unavailable"
            return False

        try:
            await self.provider.generate_text(self.PROBE_PROMPT, max_output_tokens=1)
        except Exception as e:
            console.print(f"[dim]Credential probe failed: {escape(str(e))}[/dim]")
            self.state = "unavailable"
            return False

        self.state = "available"
        return True

    def mark_unavailable(self) -> None:
        """Drop to `unavailable` after a call reported a rejected credential."""
        self.state = "unavailable"
