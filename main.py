"""
Strategy Lens - HTTP entry point.
"""

import uvicorn

from strategy_lens.config import Config


def main() -> None:
    uvicorn.run("strategy_lens.server:app", host=Config.API_HOST, port=Config.API_PORT)


if __name__ == "__main__":
    main()
