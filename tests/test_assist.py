"""Tests for the text assist and the remote text model client."""

import asyncio
import json

import httpx

from medicina.assist import TextAssist
from medicina.documents import DocumentKind
from medicina.protocols import TextModelProtocol
from medicina.remote import RemoteTextModel

from .conftest import FailingModel, FixedModel, FlakyModel


def test_refine_returns_model_text(fixed_model):
    assist = TextAssist(fixed_model)

    result = asyncio.run(assist.refine_text("paciente com febre", DocumentKind.PRESCRIPTION))

    assert result == "Refined text."
    assert "paciente com febre" in fixed_model.prompts[0]
    assert "prescription" in fixed_model.prompts[0]


def test_refine_failure_returns_input_unchanged():
    model = FailingModel()
    assist = TextAssist(model, retries=1)
    text = "  Repouso por 2 dias.\n"

    assert asyncio.run(assist.refine_text(text, "certificate")) == text
    assert model.calls == 2


def test_draft_failure_returns_empty_string():
    assist = TextAssist(FailingModel())

    assert asyncio.run(assist.draft_certificate_body("Gripe", "", "2")) == ""


def test_retry_recovers_from_one_failure():
    model = FlakyModel()
    assist = TextAssist(model, retries=1)

    assert asyncio.run(assist.draft_certificate_body("Gripe", "", "2")) == "Second time lucky."
    assert model.calls == 2


def test_no_retries_means_single_attempt():
    model = FlakyModel()
    assist = TextAssist(model, retries=0)

    assert asyncio.run(assist.refine_text("texto", "certificate")) == "texto"
    assert model.calls == 1


def test_unexpected_errors_are_not_retried():
    class BrokenModel:
        calls = 0

        async def generate(self, prompt, max_new_tokens=1024, **kwargs):
            BrokenModel.calls += 1
            raise KeyError("choices")

    assist = TextAssist(BrokenModel(), retries=3)

    assert asyncio.run(assist.refine_text("texto", "certificate")) == "texto"
    assert BrokenModel.calls == 1


def test_without_model_falls_back():
    assist = TextAssist(None)

    assert not assist.available
    assert asyncio.run(assist.refine_text("texto", "prescription")) == "texto"
    assert asyncio.run(assist.draft_certificate_body("Gripe", "", "1")) == ""


def test_empty_inputs_skip_the_model(fixed_model):
    assist = TextAssist(fixed_model)

    assert asyncio.run(assist.draft_certificate_body("   ", "obs", "1")) == ""
    assert asyncio.run(assist.refine_text("", "certificate")) == ""
    assert asyncio.run(assist.refine_text("  ", "certificate")) == "  "
    assert fixed_model.prompts == []


def test_empty_model_answer_keeps_original():
    assist = TextAssist(FixedModel(answer=""))

    assert asyncio.run(assist.refine_text("texto", "certificate")) == "texto"


def test_draft_prompt_carries_inputs(fixed_model):
    assist = TextAssist(fixed_model)

    asyncio.run(assist.draft_certificate_body("Lombalgia", "Evitar esforço", "3"))

    prompt = fixed_model.prompts[0]
    assert "Lombalgia" in prompt
    assert "Evitar esforço" in prompt
    assert "Days off: 3" in prompt


def test_fake_models_satisfy_protocol(fixed_model):
    assert isinstance(fixed_model, TextModelProtocol)


def _remote(handler) -> RemoteTextModel:
    return RemoteTextModel(
        endpoint="https://llm.test/v1/",
        api_key="secret",
        model="test-model",
        transport=httpx.MockTransport(handler),
    )


def test_remote_generate_posts_chat_completion():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "  Formal text. \n"}}]})

    async def run():
        async with _remote(handler) as model:
            return await model.generate("hello", max_new_tokens=64)

    assert asyncio.run(run()) == "Formal text."
    assert seen["url"] == "https://llm.test/v1/chat/completions"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["model"] == "test-model"
    assert seen["body"]["max_tokens"] == 64
    assert seen["body"]["messages"] == [{"role": "user", "content": "hello"}]


def test_remote_server_error_falls_back_to_original_text():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"error": "overloaded"})

    async def run():
        async with _remote(handler) as model:
            return await TextAssist(model, retries=1).refine_text("texto original", "certificate")

    assert asyncio.run(run()) == "texto original"
    assert len(calls) == 2


def test_remote_health_check():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200 if request.url.path.endswith("/models") else 404, json={})

    async def run():
        async with _remote(handler) as model:
            return await model.health_check()

    assert asyncio.run(run()) is True
