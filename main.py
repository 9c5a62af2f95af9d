# =============================================================================
# main.py  —  Entry Point for the Palo Alto Firewall Assistant
# =============================================================================
#
# HOW TO RUN:
#   PANOS_API_KEY=... OPENROUTER_API_KEY=... python main.py
#   (or put both in a .env file next to this one)
#
# WHAT HAPPENS:
#   1. Checks the firewall configuration (fails fast without PANOS_API_KEY)
#   2. Creates the Google ADK agent (agent/firewall_agent.py), which starts
#      the MCP server (tools/mcp_server.py) as a subprocess
#   3. Runs an interactive loop: your question → agent → tool calls →
#      answer
# =============================================================================

import asyncio
import sys

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm reads its provider key and
# the MCP subprocess inherits PANOS_* from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.firewall_agent import create_agent
from core.config import load_config
from core.errors import ConfigError

APP_NAME = "paloalto_assistant"
USER_ID = "operator"


async def run_agent():
    """Run the firewall assistant interactively until the user quits."""
    print("=" * 70)
    print("  PALO ALTO FIREWALL ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)

    config = load_config()
    print(f"\nFirewall API: {config.base_url}")
    print("Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Agent ready. Ask about your firewall (type 'quit' to exit).\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\nGoodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\nAgent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\nAgent:\n\n{final_response}")
        else:
            print("\nNo response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    try:
        asyncio.run(run_agent())
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
