import asyncio
import json

import pytest

from conftest import ScriptedRandomSource, index_bytes
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import (
    CorpusUnavailableError,
    EmptyAlphabetError,
    ErrorKind,
    InvalidWordCountError,
)
from keysmith.core.models import GenerationOptions, PassphraseOptions, Strength
from shared.config import KeysmithConfig


def test_generation_through_engine(engine):
    assert len(engine.generate_password().password) == 16
    assert len(engine.generate_passwords(3)) == 3
    assert engine.generate_passphrase().password[0].isupper()
    assert engine.generate_memorable_passphrase("short").password[-1].isdigit()


def test_injected_source_is_shared_by_generators():
    script = index_bytes(0, 1, 2, 3) + [7]
    engine = KeysmithEngine(source=ScriptedRandomSource(script))
    result = engine.generate_passphrase(PassphraseOptions(word_count=4))
    assert result.password.endswith("7")
    assert result.password.startswith("Able-")


def test_errors_propagate(engine):
    with pytest.raises(EmptyAlphabetError):
        engine.generate_password(GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        ))
    with pytest.raises(InvalidWordCountError):
        engine.generate_passphrase(PassphraseOptions(word_count=9))


def test_corpus_loads_lazily(engine):
    assert not engine.corpus_loaded
    result = asyncio.run(engine.analyze_password_strength(""))
    assert engine.corpus_loaded
    assert result.score == 0


def test_corpus_is_reused_across_event_loops(engine):
    first = asyncio.run(engine.analyze_password_strength("password123"))
    second = asyncio.run(engine.analyze_password_strength("password123"))
    assert first == second


def test_concurrent_first_analyses(engine):
    async def run():
        return await asyncio.gather(
            *(engine.analyze_password_strength(p) for p in ("abc123", "X9$mK#2pL@7qR!4s"))
        )

    weak, strong = asyncio.run(run())
    assert weak.strength is Strength.WEAK
    assert strong.strength is Strength.VERY_STRONG


def test_custom_corpus_and_attack_rate(tmp_path):
    corpus = tmp_path / "corpus.json"
    corpus.write_text(json.dumps({"common_passwords": ["Zebrafish"], "keyboard_patterns": []}))
    config = KeysmithConfig()
    config.analyzer.corpus_path = str(corpus)
    config.analyzer.guesses_per_second = 1.0
    engine = KeysmithEngine(config)

    result = asyncio.run(engine.analyze_password_strength("zebrafish"))
    assert result.warning is not None
    # the bundled corpus is not consulted
    assert not any("keyboard" in w for w in asyncio.run(
        engine.analyze_password_strength("qwertyuiop")).weaknesses)
    assert result.crack_time_seconds == pytest.approx(2 ** result.entropy)


def test_quick_paths(engine):
    assert engine.quick_strength_check("").score == 0
    assert engine.meets_minimum_requirements("MyPassword123").meets


def test_uniformity_uses_config_defaults(cycling_source):
    config = KeysmithConfig()
    config.analyzer.uniformity_samples = 3840
    engine = KeysmithEngine(config, source=cycling_source)
    report = engine.check_uniformity()
    assert report.bound == 384
    assert report.samples == 3840
    assert report.passed


@pytest.mark.parametrize("content", [None, "{not json"])
def test_unreadable_corpus_raises_corpus_error(tmp_path, content):
    corpus = tmp_path / "corpus.json"
    if content is not None:
        corpus.write_text(content, encoding="utf-8")
    config = KeysmithConfig()
    config.analyzer.corpus_path = str(corpus)
    engine = KeysmithEngine(config)

    with pytest.raises(CorpusUnavailableError) as info:
        asyncio.run(engine.analyze_password_strength("hunter2"))
    assert info.value.kind is ErrorKind.CORPUS_UNAVAILABLE
    assert info.value.path == str(corpus)
    assert not engine.corpus_loaded
