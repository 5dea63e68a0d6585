from datetime import datetime, timezone

import pytest

from depgraph_social.models import (
    Comment,
    EarlyExit,
    Like,
    Post,
    read_csv_file,
    read_csv_update,
)
from depgraph_social.social import TopPostsGraph

POSTS = (
    "1|2020-01-01 00:00:01|first|100\n"
    "2|2020-01-01 00:00:02|second|100\n"
    "3|2020-01-01 00:00:03|third|100\n"
    "4|2020-01-01 00:00:04|fourth|100\n"
)
COMMENTS = (
    "10|2020-01-02 00:00:00|a|101|1\n"
    "11|2020-01-02 00:00:00|b|101|2\n"
    "12|2020-01-02 00:00:00|c|101|3\n"
    "13|2020-01-02 00:00:00|d|101|10\n"
)
LIKES = "7|11\n"
CHANGES = [
    "Comments|14|2020-01-03 00:00:00|e|102|4\n",
    "Likes|8|12\nComments|15|2020-01-03 00:00:01|f|102|12\n",
]


@pytest.fixture
def model_dir(tmp_path):
    (tmp_path / "csv-posts-initial.csv").write_text(POSTS)
    (tmp_path / "csv-comments-initial.csv").write_text(COMMENTS)
    (tmp_path / "csv-likes-initial.csv").write_text(LIKES)
    for number, change in enumerate(CHANGES, start=1):
        (tmp_path / f"change{number:02}.csv").write_text(change)
    return tmp_path


def _initialised(model_dir):
    graph = TopPostsGraph()
    for comment in read_csv_file(model_dir / "csv-comments-initial.csv", Comment, "|"):
        graph.update_comments(comment)
    for post in read_csv_file(model_dir / "csv-posts-initial.csv", Post, "|"):
        graph.update_posts(post)
    for like in read_csv_file(model_dir / "csv-likes-initial.csv", Like, "|"):
        graph.update_likes(like)
    return graph


def test_initial_phase(model_dir):
    graph = _initialised(model_dir)
    assert graph.resolve().top_posts() == "1|2|3"


def test_update_phase(model_dir):
    graph = _initialised(model_dir)
    graph.resolve()
    expected = ["1|2|4", "3|1|2"]
    for number, top in enumerate(expected, start=1):
        graph.apply_updates(read_csv_update(model_dir / f"change{number:02}.csv"))
        assert graph.resolve().top_posts() == top


def test_apply_updates_ignores_likes(model_dir):
    graph = _initialised(model_dir)
    graph.resolve()
    generation = graph.likes.generation
    graph.apply_updates(read_csv_update(model_dir / "change02.csv"))
    assert graph.likes.generation == generation
    assert 15 in graph.comments


def test_resolve_without_changes_keeps_result(model_dir):
    graph = _initialised(model_dir)
    first = graph.resolve()
    top = first.top_posts()
    generation = first.query_generation if hasattr(first, "query_generation") else first.top_posts_generation
    second = graph.resolve()
    assert second.top_posts() == top
    assert second.top_posts_generation == generation


def test_resolve_cleans_inputs(model_dir):
    graph = _initialised(model_dir)
    graph.resolve()
    assert list(graph.comments.new_comments()) == []
    assert list(graph.posts.new_posts()) == []
    assert list(graph.likes.new_likes()) == []


def test_comment_on_unknown_post_exits_early():
    graph = TopPostsGraph()
    ts = datetime(2020, 1, 1, tzinfo=timezone.utc)
    graph.update_comments(Comment(20, ts, "orphan", 1, 999))
    with pytest.raises(EarlyExit, match="No score found for post id 999"):
        graph.resolve()


def test_like_without_comment_exits_early():
    graph = TopPostsGraph()
    graph.update_likes(Like(1, 77))
    with pytest.raises(EarlyExit, match="No post found for comment id 77"):
        graph.resolve()