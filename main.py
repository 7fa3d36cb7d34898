"""CLI entry point for university search and favorites."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from unifav import messages
from unifav.errors import CorruptStateError, NoWebPageError, ValidationError
from unifav.favorites import FavoriteRecord, FavoritesStore, mark_favorites
from unifav.search import SearchCoordinator, SearchSession, SearchState, UniversityRecord
from unifav.storage import create_storage
from unifav.utils.logger import get_logger

log = get_logger(__name__)


# ---- Rendering -----------------------------------------------------------


async def load_or_empty(store: FavoritesStore) -> List[FavoriteRecord]:
    """Load favorites, reporting a corrupt blob and carrying on with none."""
    try:
        return await store.load()
    except CorruptStateError as exc:
        print(f"\n{messages.LOAD_FAILED} ({exc})")
        return []


async def print_favorites(store: FavoritesStore) -> List[FavoriteRecord]:
    favorites = await load_or_empty(store)
    if not favorites:
        print(f"\n{messages.NO_FAVORITES}\n")
        return favorites
    print("\nFavorites:")
    for i, fav in enumerate(favorites, 1):
        print(f"  [{i}] {fav.web_page}  ({fav.name})")
    print()
    return favorites


async def print_results(session: SearchSession, store: FavoritesStore) -> None:
    if session.state is SearchState.FAILED:
        print(f"\n{messages.search_error_message(session.error_message or '')}\n")
        return
    if session.state is SearchState.RESULTS_EMPTY:
        print(f"\n{messages.NO_RESULTS}\n")
        return
    if session.state is not SearchState.RESULTS_FOUND:
        return

    favorites = await load_or_empty(store)
    print(f"\nFound {len(session.records)} universities:")
    for i, (uni, saved) in enumerate(mark_favorites(session.records, favorites), 1):
        star = "*" if saved else " "
        location = ", ".join(p for p in (uni.state_province, uni.country) if p)
        print(f" {star}[{i}] {uni.name} ({location})  {uni.first_web_page or '-'}")
    print()


# ---- Actions -------------------------------------------------------------


async def favorite_university(store: FavoritesStore, university: UniversityRecord) -> None:
    """Favorite a result and show the favorites list, whether it was new or not."""
    try:
        favorite = FavoriteRecord.from_university(university)
    except NoWebPageError:
        print(f"\n{messages.no_web_page_message(university.name)}\n")
        return
    try:
        outcome = await store.add(favorite)
    except CorruptStateError:
        print(f"\n{messages.SAVE_FAILED} {messages.LOAD_FAILED}\n")
        return
    print(f"\n{messages.add_message(outcome, favorite)}")
    await print_favorites(store)


async def remove_favorite(store: FavoritesStore, web_page: str, name: Optional[str] = None) -> None:
    try:
        outcome = await store.remove(web_page)
    except CorruptStateError:
        print(f"\n{messages.LOAD_FAILED}\n")
        return
    print(f"\n{messages.remove_message(outcome, web_page, name)}\n")


async def run_search(
    session: SearchSession,
    store: FavoritesStore,
    country: str,
    name: str,
    favorite_index: Optional[int] = None,
) -> None:
    try:
        await session.search(country, name)
    except ValidationError:
        print(f"\n{messages.NO_CRITERIA}\n")
        return
    await print_results(session, store)

    if favorite_index is not None:
        if not 1 <= favorite_index <= len(session.records):
            print(f"No result number {favorite_index}.\n")
            return
        await favorite_university(store, session.records[favorite_index - 1])


async def interactive_mode(session: SearchSession, store: FavoritesStore) -> None:
    """REPL loop: search, favorite results, list and remove favorites."""
    print(
        "University search  (s: search, f N: favorite result N, l: list favorites,\n"
        "                    r N: remove favorite N, q: quit)\n"
    )
    favorites: List[FavoriteRecord] = []
    while True:
        try:
            line = (await asyncio.to_thread(input, "> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not line:
            continue
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()

        if cmd in ("q", "quit", "exit"):
            print("Goodbye.")
            break
        elif cmd == "s":
            country = await asyncio.to_thread(input, "Country: ")
            name = await asyncio.to_thread(input, "University: ")
            await run_search(session, store, country, name)
        elif cmd == "l":
            favorites = await print_favorites(store)
        elif cmd in ("f", "r"):
            try:
                n = int(arg)
            except ValueError:
                print("Usage: f N / r N")
                continue
            if cmd == "f":
                if not 1 <= n <= len(session.records):
                    print(f"No result number {n}.")
                    continue
                await favorite_university(store, session.records[n - 1])
            else:
                if not 1 <= n <= len(favorites):
                    print("List favorites with 'l' first, then pick a number.")
                    continue
                fav = favorites[n - 1]
                await remove_favorite(store, fav.web_page, fav.name)
                favorites = await print_favorites(store)
        else:
            print(f"Unknown command: {cmd}")


# ---- Entry point ---------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search universities and keep favorites")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start interactive REPL mode")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    parser.add_argument("--storage", choices=("file", "redis", "memory"),
                        help="Favorites storage backend (default: STORAGE_BACKEND)")
    sub = parser.add_subparsers(dest="command")

    search = sub.add_parser("search", help="Search the university directory")
    search.add_argument("--country", "-c", default="", help="Country name, e.g. Brazil")
    search.add_argument("--name", "-n", default="", help="University name")
    search.add_argument("--favorite", "-f", type=int, metavar="N",
                        help="Favorite result number N")

    favs = sub.add_parser("favorites", help="Manage saved favorites")
    favs_sub = favs.add_subparsers(dest="action")
    favs_sub.add_parser("list", help="List favorites")
    add = favs_sub.add_parser("add", help="Add a favorite by hand")
    add.add_argument("name")
    add.add_argument("web_page")
    remove = favs_sub.add_parser("remove", help="Remove a favorite by web page")
    remove.add_argument("web_page")
    favs_sub.add_parser("clear", help="Remove every favorite")
    return parser


async def run(args: argparse.Namespace) -> int:
    store = FavoritesStore(create_storage(args.storage))
    coordinator = SearchCoordinator()
    session = SearchSession(coordinator)
    try:
        if args.interactive:
            await interactive_mode(session, store)
        elif args.command == "search":
            await run_search(session, store, args.country, args.name, args.favorite)
        elif args.command == "favorites":
            if args.action == "add":
                favorite = FavoriteRecord(name=args.name, web_page=args.web_page)
                try:
                    outcome = await store.add(favorite)
                except CorruptStateError:
                    print(f"\n{messages.SAVE_FAILED} {messages.LOAD_FAILED}\n")
                    return 1
                print(f"\n{messages.add_message(outcome, favorite)}")
                await print_favorites(store)
            elif args.action == "remove":
                await remove_favorite(store, args.web_page)
            elif args.action == "clear":
                try:
                    await store.clear()
                except CorruptStateError:
                    print(f"\n{messages.LOAD_FAILED}\n")
                    return 1
                print(f"\n{messages.NO_FAVORITES}\n")
            else:
                await print_favorites(store)
        else:
            return 1
        return 0
    finally:
        await coordinator.aclose()
        await store.storage.aclose()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("unifav") or name == __name__:
                logging.getLogger(name).setLevel(logging.DEBUG)

    if not args.interactive and args.command is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
