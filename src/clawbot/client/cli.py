"""CLI client for the Clawbot API."""

from __future__ import annotations

import logging
from typing import (
    Any,
    Dict,
    List,
    Tuple,
    cast,
)

import httpx

from clawbot.common import (
    AnsiColors,
    colored_print,
)
from clawbot.config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI Client
# ---------------------------------------------------------------------------
def get_user_message() -> Tuple[str, bool]:
    """
    Get a message from the user via standard input.

    Returns:
        Tuple of (user_input, success_flag)
        The success_flag is False if input couldn't be read (e.g., Ctrl+C)
    """
    import signal  # pylint: disable=import-outside-toplevel

    # Ensure SIGINT breaks out of slow system calls such as read()
    signal.siginterrupt(signal.SIGINT, True)

    try:
        user_input = input().strip()
        return user_input, True
    except (EOFError, KeyboardInterrupt):
        return "", False


def call_api(endpoint: str, data: Dict[str, Any], max_retries: int = 5) -> Dict[str, Any]:
    """Make a POST request to the API and return the decoded body, retrying while it starts up."""
    api_url = f"http://localhost:{settings.API_PORT}{endpoint}"

    for attempt in range(max_retries):
        try:
            with httpx.Client(timeout=30.0) as client:
                response = client.post(api_url, json=data)
                response.raise_for_status()
                return cast(Dict[str, Any], response.json())
        except httpx.ConnectError as e:
            if attempt < max_retries - 1:
                retry_delay = 0.5 * (2**attempt)  # exponential backoff: 0.5s, 1s, 2s, 4s...
                logger.info(
                    "API not ready yet, retrying in %.1f seconds (attempt %d/%d)...",
                    retry_delay,
                    attempt + 1,
                    max_retries,
                )
                import time  # pylint: disable=import-outside-toplevel

                time.sleep(retry_delay)
                continue
            logger.error("API connection error: %s", str(e))
            return {"error": f"Error connecting to API: {str(e)}"}
        except httpx.HTTPStatusError as e:
            logger.error("API request error: %s", str(e))
            try:
                return cast(Dict[str, Any], e.response.json())
            except ValueError:
                return {"error": f"API error: {e.response.status_code}"}
        except httpx.HTTPError as e:
            logger.error("API request error: %s", str(e))
            return {"error": f"Error connecting to API: {str(e)}"}

    return {"error": f"Failed to connect to API after {max_retries} attempts"}


def show_turn(turn: Dict[str, Any]) -> None:
    """Print a decoded agent turn: reasoning, then the reply."""
    for line in turn.get("reasoning", []):
        colored_print(f"· {line}", AnsiColors.GREEN)
    colored_print(turn["message"]["content"], AnsiColors.YELLOW)


def run_cli() -> None:
    """Run the CLI client; the running history lives here and is sent in full each turn."""
    history: List[Dict[str, str]] = []

    colored_print("\n🦀 Clawbot shell - type 'exit' or 'quit' (or Ctrl+C) to exit", AnsiColors.GREEN)
    while True:
        colored_print("\n🧑 You: ", AnsiColors.BLUE, end="")
        user_msg, ok = get_user_message()
        if not ok:
            break  # Exit if user input couldn't be retrieved (e.g., Ctrl+C)
        if user_msg.lower() in {"exit", "quit"}:
            break
        if not user_msg:
            continue

        history.append({"role": "user", "content": user_msg})
        response = call_api("/chat", {"messages": history})

        if "error" in response:
            colored_print(f"⚠️ {response['error']}", AnsiColors.RED)
            history.pop()  # Let the user retry without a dangling message
            continue

        show_turn(response)
        history.append({"role": "assistant", "content": response["message"]["content"]})


if __name__ == "__main__":
    run_cli()
