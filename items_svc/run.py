import argparse

import uvicorn

from items_svc.core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the items service API")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--reload", action="store_true")

    args = parser.parse_args()

    uvicorn.run("items_svc.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
