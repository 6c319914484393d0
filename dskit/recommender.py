"""Movie recommendations from a bipartite graph of user ratings."""

from __future__ import annotations

import argparse
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Sequence


class RecommendationEngine:
    """Ratings stored as edges between users and movies."""

    def __init__(self) -> None:
        self.user_to_movies: dict[int, list[tuple[str, int]]] = defaultdict(list)
        self.movie_to_users: dict[str, list[tuple[int, int]]] = defaultdict(list)

    def add_rating(self, user: int, movie: str, rating: int) -> None:
        """Record that ``user`` gave ``movie`` the score ``rating``."""
        self.user_to_movies[user].append((movie, rating))
        self.movie_to_users[movie].append((user, rating))

    def recommend(self, watched_movie: str) -> list[tuple[str, float]]:
        """Return other movies scored by co-rating, highest score first.

        A movie's score sums, over users who rated ``watched_movie``, the
        product of their two ratings. An unknown movie gives no results.
        """
        if watched_movie not in self.movie_to_users:
            return []
        scores: dict[str, float] = defaultdict(float)
        for user, watched_rating in self.movie_to_users[watched_movie]:
            for movie, rating in self.user_to_movies[user]:
                if movie != watched_movie:
                    scores[movie] += watched_rating * rating
        return sorted(scores.items(), key=lambda item: item[1], reverse=True)

    def format_graph(self) -> str:
        """Return both adjacency views of the graph."""
        lines = ["User -> Movies:"]
        lines.extend(
            f"User {user}: " + "".join(f"({m}, {r}) " for m, r in movies)
            for user, movies in self.user_to_movies.items()
        )
        lines.append("Movie -> Users:")
        lines.extend(
            f"Movie {movie}: " + "".join(f"({u}, {r}) " for u, r in users)
            for movie, users in self.movie_to_users.items()
        )
        return "\n".join(lines)

    def load(self, lines: Iterable[str]) -> None:
        """Add ratings from lines of the form ``user movie rating``.

        Blank lines are skipped; a malformed line raises ValueError.
        """
        for number, line in enumerate(lines, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 3:
                raise ValueError(f"line {number}: expected 'user movie rating'")
            user, movie, rating = fields
            try:
                self.add_rating(int(user), movie, int(rating))
            except ValueError as error:
                raise ValueError(f"line {number}: {error}") from None


def load_ratings(path: str | Path) -> RecommendationEngine:
    """Build an engine from a ratings file."""
    engine = RecommendationEngine()
    with open(path, encoding="utf-8") as handle:
        engine.load(handle)
    return engine


def main(argv: Sequence[str] | None = None) -> int:
    """Show the rating graph and recommend movies for one watched movie."""
    parser = argparse.ArgumentParser(description="Recommend movies from ratings.")
    parser.add_argument("ratings", nargs="?", default="MovieRatings.txt")
    parser.add_argument("movie", nargs="?")
    args = parser.parse_args(argv)

    try:
        engine = load_ratings(args.ratings)
    except OSError as error:
        parser.exit(1, f"Error opening file: {error}\n")

    print("Graph representation:")
    print(engine.format_graph())
    watched = args.movie
    if watched is None:
        watched = input("Enter a movie you recently watched: ").strip()

    recommendations = engine.recommend(watched)
    if not recommendations:
        print(f"No recommendations found for movie {watched}")
    else:
        print(
            "Recommended movies: "
            + "".join(f"{movie} (Score: {score:g}) " for movie, score in recommendations)
        )
    return 0