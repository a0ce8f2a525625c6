from google import genai
from config import GEMINI_API_KEY, STORY_MODEL_NAME, IMAGE_MODEL_NAME, SPEECH_MODEL_NAME

client = None

if GEMINI_API_KEY:
    try:
        client = genai.Client(api_key=GEMINI_API_KEY)
        print(f"Gemini client configured successfully.")
        print(f"Gemini model '{STORY_MODEL_NAME}' will be used for story generation.")
        print(f"Gemini model '{IMAGE_MODEL_NAME}' will be used for illustrations.")
        print(f"Gemini model '{SPEECH_MODEL_NAME}' will be used for narration.")
    except Exception as e:
        print(f"Error configuring Gemini client: {e}")
else:
    print("Error: GEMINI_API_KEY not found in config. Core LLM features will be skipped.")
