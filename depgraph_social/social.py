"""Incremental graph computing the top posts of a social network."""

from typing import Iterable

from depgraph_social.comments_to_posts import CommentsToPosts
from depgraph_social.inputs import Comments, Likes, Posts
from depgraph_social.models import Comment, Like, Post, Update, UpdateKind
from depgraph_social.post_scores_query import PostScoresQuery


class TopPostsGraph:
    """Comments, posts and likes feeding a top-posts query.

    Derived nodes are recomputed only when something they depend on has
    changed since the last successful resolve; inputs are then cleaned so
    that the next resolve sees only records added after this one.
    """

    def __init__(self) -> None:
        self.comments = Comments()
        self.posts = Posts()
        self.likes = Likes()
        self.comments_to_posts = CommentsToPosts()
        self.query = PostScoresQuery()
        self._seen: dict = {}

    def update_comments(self, comment: Comment) -> None:
        self.comments.update(comment)

    def update_posts(self, post: Post) -> None:
        self.posts.update(post)

    def update_likes(self, like: Like) -> None:
        self.likes.update(like)

    def apply_updates(self, updates: Iterable[Update]) -> None:
        """Apply post and comment updates; other kinds of record are ignored."""
        for update in updates:
            if update.kind is UpdateKind.POSTS:
                self.update_posts(update.record)
            elif update.kind is UpdateKind.COMMENTS:
                self.update_comments(update.record)

    def _changed(self, state: dict) -> set:
        return {name for name, marker in state.items() if self._seen.get(name) != marker}

    def resolve(self) -> PostScoresQuery:
        """Bring the query up to date and return it."""
        state = {
            "comments": self.comments.generation,
            "posts": self.posts.generation,
            "likes": self.likes.generation,
        }
        dirty = self._changed(state)
        if "comments" in dirty:
            self.comments_to_posts.update(self.comments)
        state["comments_to_posts"] = len(self.comments_to_posts)
        dirty = self._changed(state)
        if dirty:
            self.query.update(self.comments, self.comments_to_posts, self.posts, self.likes)
        self._seen = state
        self.comments.clean()
        self.posts.clean()
        self.likes.clean()
        return self.query