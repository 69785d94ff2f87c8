"""
Generative advice layer.

Responsibilities:
- Manage Gemini / Groq API configuration and credentials.
- Build the dermatologist-assistant prompt from the user's profile.
- Call the configured provider, attaching the photo when Gemini is used.
- Fall back to locally generated advice when no provider is available or
  the call fails.
"""
