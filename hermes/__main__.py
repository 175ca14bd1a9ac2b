# hermes/__main__.py
import uvicorn

from hermes.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("hermes.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
