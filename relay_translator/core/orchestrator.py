"""
Relay orchestration

Runs the two-hop "telephone game" translation:
original -> random intermediate language -> fixed target language,
inside one tracked operation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from relay_translator.config import TARGET_LANGUAGE, MIN_CHAIN_ROUNDS, MAX_CHAIN_ROUNDS
from relay_translator.core.exceptions import ProviderError, RelayError, RelayStage
from relay_translator.core.languages import LanguageCatalog, LanguageSelector
from relay_translator.core.providers import TranslationProvider
from relay_translator.core.result import Ok, Err
from relay_translator.utils.unified_logger import UnifiedLogger


class RelayState(Enum):
    """Progress of a single relay execution"""
    IDLE = "idle"
    SELECTING_LANGUAGE = "selecting_language"
    TRANSLATING_TO_INTERMEDIATE = "translating_to_intermediate"
    TRANSLATING_TO_TARGET = "translating_to_target"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class RelayResult:
    """Outcome of one successful relay"""
    original_text: str
    intermediate_text: str
    intermediate_language: str
    final_text: str

    def to_dict(self) -> dict:
        return {
            'original_text': self.original_text,
            'intermediate_text': self.intermediate_text,
            'intermediate_language': self.intermediate_language,
            'final_text': self.final_text,
        }


@dataclass(frozen=True)
class ChainResult:
    """Outcome of several relays, each fed the previous final text"""
    rounds: Tuple[RelayResult, ...]

    @property
    def final_text(self) -> str:
        return self.rounds[-1].final_text

    def to_dict(self) -> dict:
        return {
            'rounds': [r.to_dict() for r in self.rounds],
            'final_text': self.final_text,
        }


class RelayOrchestrator:
    """Composes selector, provider and logger into the relay operation"""

    OPERATION_NAME = "translation_request"
    CHAIN_OPERATION_NAME = "multi_translation"

    def __init__(self, catalog: LanguageCatalog, selector: LanguageSelector,
                 provider: TranslationProvider, logger: UnifiedLogger,
                 target_language: str = TARGET_LANGUAGE):
        self.catalog = catalog
        self.selector = selector
        self.provider = provider
        self.logger = logger
        self.target_language = target_language

    def _transition(self, state: RelayState):
        self.logger.debug("relay state", "state", state.value)

    def execute(self, text: str) -> Union[Ok[RelayResult], Err[RelayError]]:
        """
        Relay text through a random intermediate language into the target language.

        Empty text is not rejected here; input validation belongs to the caller.

        Returns:
            Ok(RelayResult) on success, Err(RelayError) tagged with the failing hop
        """
        self._transition(RelayState.IDLE)
        tracker = self.logger.start_operation(self.OPERATION_NAME, {
            'original_text': text,
            'text_length': len(text),
        })

        self._transition(RelayState.SELECTING_LANGUAGE)
        intermediate_language = self.selector.select_random(self.catalog)
        self.logger.info("intermediate language selected",
                         "intermediate_language", intermediate_language)

        self._transition(RelayState.TRANSLATING_TO_INTERMEDIATE)
        try:
            intermediate_text = self.provider.translate(text, intermediate_language)
        except ProviderError as e:
            self._transition(RelayState.FAILED)
            self.logger.error_operation(tracker, e, "intermediate translation failed")
            return Err(RelayError(RelayStage.INTERMEDIATE, e))

        self.logger.info("intermediate translation done",
                         "intermediate_text", intermediate_text,
                         "target_language", intermediate_language)

        self._transition(RelayState.TRANSLATING_TO_TARGET)
        try:
            final_text = self.provider.translate(intermediate_text, self.target_language)
        except ProviderError as e:
            self._transition(RelayState.FAILED)
            self.logger.error_operation(tracker, e, "final translation failed")
            return Err(RelayError(RelayStage.FINAL, e))

        self.logger.info("final translation done", "final_text", final_text)

        result = RelayResult(
            original_text=text,
            intermediate_text=intermediate_text,
            intermediate_language=intermediate_language,
            final_text=final_text,
        )
        self.logger.complete_operation(tracker, {
            'original_text': result.original_text,
            'intermediate_language': result.intermediate_language,
            'final_text': result.final_text,
        })
        self._transition(RelayState.COMPLETED)
        return Ok(result)

    def execute_chain(self, text: str, rounds: int) -> Union[Ok[ChainResult], Err[RelayError]]:
        """
        Run several relays back to back, feeding each final text into the next round.

        Stops at the first failed round and returns its error.

        Raises:
            ValueError: If rounds is outside the allowed range
        """
        if not MIN_CHAIN_ROUNDS <= rounds <= MAX_CHAIN_ROUNDS:
            raise ValueError(f"rounds must be between {MIN_CHAIN_ROUNDS} and {MAX_CHAIN_ROUNDS}, got {rounds}")

        tracker = self.logger.start_operation(self.CHAIN_OPERATION_NAME, {
            'original_text': text,
            'repeat_count': rounds,
        })

        completed = []
        current = text
        for step in range(1, rounds + 1):
            outcome = self.execute(current)
            if outcome.is_err():
                self.logger.error_operation(tracker, outcome.unwrap_err(), f"round {step} failed")
                return outcome
            completed.append(outcome.unwrap())
            current = outcome.unwrap().final_text

        chain = ChainResult(rounds=tuple(completed))
        self.logger.complete_operation(tracker, {
            'rounds': len(chain.rounds),
            'final_text': chain.final_text,
        })
        return Ok(chain)
