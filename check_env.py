#!/usr/bin/env python3
"""Quick script to check which marks memo verifier the backend will use."""
import os
from dotenv import load_dotenv

from marks_memo_verifier.agent import DEFAULT_MODEL, resolve_api_key, resolve_simulated_delay

load_dotenv()

api_key = resolve_api_key()
environment = os.environ.get("ENVIRONMENT", "NOT SET")
model = os.environ.get("VERIFICATION_MODEL", DEFAULT_MODEL)

print(f"Environment: {environment}")
print(f"Verification model: {model}")

if api_key:
    print(f"✅ GEMINI MODE (key ...{api_key[-4:]})")
else:
    print("⚠️  SIMULATION MODE - no GOOGLE_API_KEY/API_KEY set, uploads get a canned verdict")
    print(f"Simulated delay: {resolve_simulated_delay():.1f}s")
