"""Fetch a dad joke from the terminal, optionally saving it as a favorite."""

import argparse
import asyncio
import sys
from typing import Optional

from app.config import settings
from app.core.errors import FetchError, PersistError
from app.schemas import JokeRecord
from app.services.favorites import FavoritesStore
from app.services.joke_fetcher import JokeFetcher
from app.services.persistence import FavoritesGateway


async def fetch_random_joke(
    save: bool = False,
    fetcher: Optional[JokeFetcher] = None,
    gateway: Optional[FavoritesGateway] = None,
) -> int:
    if fetcher is None:
        fetcher = JokeFetcher(url=settings.joke_api_url, user_agent=settings.user_agent)
    try:
        joke = await fetcher.fetch_joke()
    except FetchError as exc:
        print(f"Could not retrieve or decode the JSON from endpoint: {exc.cause}", file=sys.stderr)
        return 1
    finally:
        await fetcher.aclose()

    print(joke.joke)
    return save_favorite(joke, gateway) if save else 0


def save_favorite(joke: JokeRecord, gateway: Optional[FavoritesGateway] = None) -> int:
    if gateway is None:
        gateway = FavoritesGateway(settings.favorites_path)
    try:
        store = FavoritesStore(gateway.load())
        if store.add(joke):
            gateway.save(store.all())
            print(f"Saved to {gateway.path}")
        else:
            print("Already a favorite.")
    except PersistError as exc:
        print(f"Unable to update favorites: {exc.cause}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Print a dad joke from icanhazdadjoke.com.")
    parser.add_argument("--save", action="store_true", help="Also add the joke to the saved favorites")
    args = parser.parse_args(argv)
    sys.exit(asyncio.run(fetch_random_joke(save=args.save)))


if __name__ == "__main__":
    main()
