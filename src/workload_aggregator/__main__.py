"""Run the Workload Aggregator with uvicorn."""

import uvicorn

from .main import settings


def main() -> None:
    uvicorn.run(
        "workload_aggregator.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
    )


if __name__ == "__main__":
    main()
