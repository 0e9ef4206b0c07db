"""Evaluator MCP Server - JavaScript coercion and comparison semantics."""

import logging
import sys

from fastmcp import FastMCP

from .config import EvaluatorServerConfig, get_config
from .tools import register_evaluator_tools

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
    Evaluator server answers questions about JavaScript's implicit coercions:

    Core Tools:
    - coerce_value: ToPrimitive / ToNumber / ToString / ToBoolean of a value
    - compare_values: ==, !=, ===, !==, <, <=, >, >=
    - select_logical: value-selecting && and || with short-circuit reporting
    - inspect_value: every conversion of one value at once
    - apply_operator: binary +, unary +, -, !, ~ and typeof

    Value encoding:
    - Bare JSON scalars: true/false, numbers, strings, null
    - Tagged: {"type": "undefined"}, {"type": "number", "value": "NaN" | "-0" | "Infinity"}
    - Objects: {"type": "object", "id": "a", "valueOf": <value>, "toString": <value>}
      Objects sharing an "id" within one call are the same object.

    Best Practices:
    - Use inspect_value first when a value behaves unexpectedly
    - Read hook_calls in responses to see which valueOf/toString hooks ran
"""


class EvaluatorServer:
    """Evaluator server with lifecycle management."""

    def __init__(self, config: EvaluatorServerConfig | None = None):
        self.config = config or get_config()
        self.mcp = FastMCP(
            name=self.config.server_name,
            version=__version__,
            instructions=INSTRUCTIONS,
        )
        self._initialized = False

    def initialize(self) -> None:
        """Register tools once."""
        if self._initialized:
            return

        logger.info(f"Initializing evaluator server: {self.config.server_name}")
        register_evaluator_tools(self.mcp, self.config)
        self._initialized = True
        logger.info(f"Evaluator server initialized successfully: {self.config.server_name}")

    def run(self) -> None:
        """Run the MCP server on the configured transport."""
        self.initialize()
        logger.info(f"Starting MCP server on {self.config.transport}")
        self.mcp.run(transport=self.config.transport)


def create_server(config: EvaluatorServerConfig | None = None) -> FastMCP:
    """Build an initialized FastMCP instance with all evaluator tools registered."""
    server = EvaluatorServer(config)
    server.initialize()
    return server.mcp


def main():
    """Entry point for the evaluator server."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = get_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.debug_mode else getattr(logging, config.log_level))

    logger.info(f"Starting evaluator server with configuration: transport={config.transport}")

    server = EvaluatorServer(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Server failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
