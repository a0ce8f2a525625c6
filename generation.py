import base64
from typing import List, Optional, Type, TypeVar

from google.genai import types
from pydantic import BaseModel, ValidationError

from config import (
    FALLBACK_IMAGE_URL,
    IMAGE_MODEL_NAME,
    SPEECH_MAX_ATTEMPTS,
    SPEECH_MODEL_NAME,
    SPEECH_RETRY_DELAY_SECONDS,
    STORY_MODEL_NAME,
    VOICE_NAME,
)
from prompts import get_illustration_prompt, get_narration_prompt
from retry import RetryPolicy, call_with_retry, is_rate_limited

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ContentGenerationError(Exception):
    """The service gave no usable content, or cannot be reached at all."""


def _response_parts(response) -> List[types.Part]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates or candidates[0].content is None:
        return []
    return candidates[0].content.parts or []


class ContentGenerator:
    """Thin client for the three Gemini calls the adventure needs.

    Structured content is load-bearing and raises on failure. Illustrations
    and narration are best-effort: they degrade to a placeholder image or to
    no audio instead of raising.
    """

    def __init__(
        self,
        client,
        story_model: str = STORY_MODEL_NAME,
        image_model: str = IMAGE_MODEL_NAME,
        speech_model: str = SPEECH_MODEL_NAME,
        voice_name: str = VOICE_NAME,
        speech_retry: Optional[RetryPolicy] = None,
        fallback_image: str = FALLBACK_IMAGE_URL,
    ):
        self.client = client
        self.story_model = story_model
        self.image_model = image_model
        self.speech_model = speech_model
        self.voice_name = voice_name
        self.speech_retry = speech_retry or RetryPolicy(
            max_attempts=SPEECH_MAX_ATTEMPTS,
            delay_seconds=SPEECH_RETRY_DELAY_SECONDS,
            retry_on=is_rate_limited,
        )
        self.fallback_image = fallback_image

    @classmethod
    def from_config(cls) -> "ContentGenerator":
        from models import client

        if client is None:
            raise ContentGenerationError("Gemini client is not configured. Set GEMINI_API_KEY in your .env file.")
        return cls(client)

    def generate_structured_content(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        print(f"\n--- Generating {schema.__name__} via LLM ---")
        response = self.client.models.generate_content(
            model=self.story_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        raw_text = response.text
        if not raw_text:
            raise ContentGenerationError(f"Empty or blocked response while generating {schema.__name__}.")
        try:
            return schema.model_validate_json(raw_text)
        except ValidationError as e:
            raise ContentGenerationError(f"Response does not match {schema.__name__}: {e}") from e

    def generate_illustration(self, prompt: str) -> str:
        print("\n--- Generating Illustration via LLM ---")
        try:
            response = self.client.models.generate_content(
                model=self.image_model,
                contents=get_illustration_prompt(prompt),
                config=types.GenerateContentConfig(
                    image_config=types.ImageConfig(aspect_ratio="16:9"),
                ),
            )
        except Exception as e:
            print(f"Error during illustration generation: {e}. Using fallback image.")
            return self.fallback_image

        for part in _response_parts(response):
            if part.inline_data and part.inline_data.data:
                mime_type = part.inline_data.mime_type or "image/png"
                encoded = base64.b64encode(part.inline_data.data).decode("ascii")
                return f"data:{mime_type};base64,{encoded}"

        print("Warning: No inline image in illustration response. Using fallback image.")
        return self.fallback_image

    def _request_speech(self, text: str):
        return self.client.models.generate_content(
            model=self.speech_model,
            contents=get_narration_prompt(text),
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=self.voice_name),
                    ),
                ),
            ),
        )

    def generate_narration(self, text: str) -> Optional[bytes]:
        print("\n--- Generating Narration via LLM ---")
        try:
            response = call_with_retry(self.speech_retry, self._request_speech, text)
        except Exception as e:
            print(f"Speech generation failed: {e}")
            return None

        parts = _response_parts(response)
        if not parts or not parts[0].inline_data:
            print("Warning: No inline audio in narration response.")
            return None
        return parts[0].inline_data.data or None
