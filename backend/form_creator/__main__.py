import uvicorn

from form_creator.core.config import settings


def main() -> None:
    uvicorn.run("form_creator.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
