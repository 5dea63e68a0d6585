"""Query that keeps the three highest scoring posts up to date."""

import heapq
from dataclasses import dataclass
from datetime import datetime

from depgraph_social.comments_to_posts import CommentsToPosts
from depgraph_social.inputs import Comments, Likes, Posts
from depgraph_social.models import EarlyExit

TOP_COUNT = 3
COMMENT_SCORE = 10
LIKE_SCORE = 1


@dataclass
class _PostScore:
    score: int
    ts: datetime
    id: int

    def key(self) -> tuple:
        return (self.score, self.ts, self.id)


class PostScoresQuery:
    """Cumulative post scores and the top posts by (score, timestamp, id)."""

    def __init__(self) -> None:
        self._post_scores: dict[int, _PostScore] = {}
        self._top: list = []
        self.top_posts_generation = 0

    def top_posts(self) -> str:
        """Ids of the top posts, best first, separated by ``|``."""
        ranked = sorted(self._top, reverse=True)
        return "|".join(str(post_id) for _, _, post_id in ranked)

    def _update_post_score(self, post_id: int, score: int) -> bool:
        try:
            entry = self._post_scores[post_id]
        except KeyError:
            raise EarlyExit(f"No score found for post id {post_id}") from None
        entry.score += score
        return self._update_top_posts(entry.key())

    def _update_top_posts(self, candidate: tuple) -> bool:
        if len(self._top) < TOP_COUNT:
            heapq.heappush(self._top, candidate)
            return True
        if candidate > self._top[0]:
            self._top = [entry for entry in self._top if entry[2] != candidate[2]]
            heapq.heapify(self._top)
            if len(self._top) < TOP_COUNT:
                heapq.heappush(self._top, candidate)
            else:
                heapq.heapreplace(self._top, candidate)
            return True
        return False

    def update(
        self,
        comments: Comments,
        comments_to_posts: CommentsToPosts,
        posts: Posts,
        likes: Likes,
    ) -> None:
        """Score the posts, comments and likes added since the inputs were cleaned."""
        for post in posts.new_posts():
            self._post_scores[post.id] = _PostScore(0, post.ts, post.id)

        changed = False
        for comment in comments.new_comments():
            post_id = comments_to_posts.get_post_id(comment.id)
            if self._update_post_score(post_id, COMMENT_SCORE):
                changed = True

        for like in likes.new_likes():
            post_id = comments_to_posts.get_post_id(like.comment_id)
            if self._update_post_score(post_id, LIKE_SCORE):
                changed = True

        if changed:
            self.top_posts_generation += 1