import pytest

from dskit.recommender import RecommendationEngine, load_ratings, main

RATINGS = """1 A 5
1 B 4
2 A 3
2 C 5
3 B 2
3 C 1
"""


@pytest.fixture
def engine():
    result = RecommendationEngine()
    result.load(RATINGS.splitlines())
    return result


def test_single_user_score():
    single = RecommendationEngine()
    single.add_rating(1, "A", 5)
    single.add_rating(1, "B", 4)
    assert single.recommend("A") == [("B", 20.0)]


def test_recommend_excludes_watched_and_is_sorted(engine):
    results = engine.recommend("A")
    movies = [movie for movie, _ in results]
    assert "A" not in movies
    assert set(movies) == {"B", "C"}
    scores = [score for _, score in results]
    assert scores == sorted(scores, reverse=True)


def test_recommend_unknown_movie_is_empty(engine):
    assert engine.recommend("Z") == []


def test_recommend_scores_grow_with_ratings(engine):
    before = dict(engine.recommend("A"))
    engine.add_rating(4, "A", 2)
    engine.add_rating(4, "B", 2)
    after = dict(engine.recommend("A"))
    assert after["B"] > before["B"]
    assert after["C"] == before["C"]


def test_both_views_hold_every_rating(engine):
    user_edges = {
        (user, movie, rating)
        for user, movies in engine.user_to_movies.items()
        for movie, rating in movies
    }
    movie_edges = {
        (user, movie, rating)
        for movie, users in engine.movie_to_users.items()
        for user, rating in users
    }
    assert user_edges == movie_edges
    assert len(user_edges) == len(RATINGS.splitlines())


def test_format_graph(engine):
    lines = engine.format_graph().splitlines()
    assert lines[0] == "User -> Movies:"
    assert "Movie -> Users:" in lines
    assert "User 1: (A, 5) (B, 4) " in lines
    assert "Movie C: (2, 5) (3, 1) " in lines


def test_load_skips_blank_lines():
    blank = RecommendationEngine()
    blank.load(["", "   ", "7 Q 3"])
    assert blank.user_to_movies[7] == [("Q", 3)]


@pytest.mark.parametrize("line", ["1 A", "x A 5", "1 A five", "1 A 5 6"])
def test_load_rejects_malformed_lines(line):
    with pytest.raises(ValueError):
        RecommendationEngine().load([line])


def test_load_ratings_from_file(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text(RATINGS, encoding="utf-8")
    loaded = load_ratings(path)
    assert sorted(loaded.movie_to_users) == ["A", "B", "C"]


def test_load_ratings_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_ratings(tmp_path / "missing.txt")


def test_main_prints_recommendations(tmp_path, capsys):
    path = tmp_path / "ratings.txt"
    path.write_text(RATINGS, encoding="utf-8")
    assert main([str(path), "A"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Graph representation:")
    assert "Recommended movies: " in out
    assert "(Score: " in out


def test_main_no_recommendations(tmp_path, capsys):
    path = tmp_path / "ratings.txt"
    path.write_text(RATINGS, encoding="utf-8")
    main([str(path), "Z"])
    assert "No recommendations found for movie Z" in capsys.readouterr().out


def test_main_reads_movie_from_input(tmp_path, capsys, monkeypatch):
    path = tmp_path / "ratings.txt"
    path.write_text(RATINGS, encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda prompt="": "B")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Recommended movies: " in out


def test_main_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.txt"), "A"])
    assert info.value.code == 1