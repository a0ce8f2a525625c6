import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Access your API key
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Model names
STORY_MODEL_NAME = os.getenv("STORY_MODEL_NAME", "gemini-2.5-flash") # Structured story/question/answer and ability report
IMAGE_MODEL_NAME = os.getenv("IMAGE_MODEL_NAME", "gemini-2.5-flash-image") # Cartoon illustrations
SPEECH_MODEL_NAME = os.getenv("SPEECH_MODEL_NAME", "gemini-2.5-flash-preview-tts") # Narration

VOICE_NAME = os.getenv("VOICE_NAME", "Kore")
STORY_LANGUAGE = os.getenv("STORY_LANGUAGE", "English")

# Narration audio comes back as raw 16-bit PCM
SAMPLE_RATE = int(os.getenv("SAMPLE_RATE", "24000"))
CHANNELS = int(os.getenv("CHANNELS", "1"))

SPEECH_MAX_ATTEMPTS = int(os.getenv("SPEECH_MAX_ATTEMPTS", "2"))
SPEECH_RETRY_DELAY_SECONDS = float(os.getenv("SPEECH_RETRY_DELAY_SECONDS", "2.0"))

FALLBACK_IMAGE_URL = os.getenv("FALLBACK_IMAGE_URL", "https://picsum.photos/800/450")
