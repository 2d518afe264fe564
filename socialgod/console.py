"""
Content console - wires gate, persona, history and generation together.

Control flow:
1. startup() loads history and persona, then probes the credential gate
2. generate() / attach_image() / analyze() go through the GenerationClient
3. Results are written to the repository only after the call resolves

Only one script generation runs at a time; the `busy` flag plays the role
of a disabled trigger button.
"""

from pathlib import Path

from .config import Config, load_config
from .exceptions import ConnectionFailed, CredentialMissing
from .gate import CredentialGate
from .generation import GenerationClient
from .history import ScriptRepository
from .models import CtaPlacement, ScriptContent, TrendingTopic, VideoDuration
from .persona import PersonaStore
from .providers import GenerativeProvider, get_provider
from .storage import LocalStore


class ContentConsole:
    """Session state for the script console."""

    def __init__(
        self,
        config: Config | None = None,
        provider: GenerativeProvider | None = None,
        store: LocalStore | None = None,
    ):
        """Initialize the console.

        Args:
            config: Configuration object. If None, loads from config.yaml.
            provider: Generative provider. If None, built from config.
            store: Local store. If None, rooted at config.paths.data_dir.
        """
        self.config = config or load_config()
        self.provider = provider or get_provider(self.config)
        self.store = store or LocalStore(self.config.paths.data_dir)

        self.gate = CredentialGate(self.provider)
        self.client = GenerationClient(self.config, self.provider)
        self.repository = ScriptRepository(self.store, self.config.storage.scripts_key)
        self.personas = PersonaStore(self.store, self.config.storage.persona_key)

        self.trends: list[TrendingTopic] = []
        self.busy = False

    async def startup(self) -> bool:
        """Hydrate local state and probe the backend.

        Returns:
            True if generation features are available.
        """
        self.repository.load_all()
        self.personas.load()
        available = await self.gate.check_capability()
        if available:
            await self.refresh_trends()
        return available

    async def connect(self) -> bool:
        """Recovery action: re-probe the backend."""
        available = await self.gate.check_capability()
        if available:
            await self.refresh_trends()
        return available

    async def refresh_trends(self) -> list[TrendingTopic]:
        self.trends = await self.client.fetch_trends()
        return self.trends

    async def generate(
        self,
        topic: str,
        duration: VideoDuration = VideoDuration.MEDIUM,
        cta_placement: CtaPlacement = CtaPlacement.MIDDLE,
    ) -> ScriptContent:
        """Generate a script and record it at the front of the history.

        Raises:
            CredentialMissing: If the gate is not available
            RuntimeError: If a generation is already in flight
            ValueError: If the topic is blank
            ConnectionFailed, GenerationFailed: From the client
        """
        if not self.gate.is_available:
            raise CredentialMissing("Generation is disabled until the backend is reachable")
        if self.busy:
            raise RuntimeError("A generation is already in progress")
        if not topic or not topic.strip():
            raise ValueError("Topic must not be empty")

        self.busy = True
        try:
            script = await self.client.generate_script(
                topic, self.personas.current, duration, cta_placement
            )
        except ConnectionFailed as e:
            if e.credential_rejected:
                self.gate.mark_unavailable()
            raise
        finally:
            self.busy = False

        self.repository.prepend(script)
        return script

    async def attach_image(self, script_id: str) -> ScriptContent:
        """Generate a hook image for a stored script and save it on the record.

        An empty result (no credential) leaves the record unchanged.

        Raises:
            KeyError: If no script has this id
        """
        script = self.repository.get(script_id)
        if script is None:
            raise KeyError(script_id)

        try:
            image_url = await self.client.generate_hook_image(script.hook_visual_desc)
        except ConnectionFailed as e:
            if e.credential_rejected:
                self.gate.mark_unavailable()
            raise

        if not image_url:
            return script

        # Re-read: the record may have been replaced while the call was in flight
        current = self.repository.get(script_id) or script
        updated = current.with_image(image_url)
        self.repository.replace(script_id, updated)
        return updated

    async def analyze(self, path: Path | str) -> str:
        """Critique a media file against the current persona."""
        try:
            return await self.client.analyze_media_file(path, self.personas.current)
        except ConnectionFailed as e:
            if e.credential_rejected:
                self.gate.mark_unavailable()
            raise
