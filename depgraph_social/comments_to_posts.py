"""Mapping from every comment to the post at the root of its thread."""

from depgraph_social.inputs import Comments
from depgraph_social.models import EarlyExit


class CommentsToPosts:
    """Maps comment ids to the id of the oldest ancestor post.

    Comments form trees whose roots are posts. Comments are append-only, so
    the number of mapped comments serves as this node's change marker.
    """

    def __init__(self) -> None:
        self._comments_to_posts: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._comments_to_posts)

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._comments_to_posts

    def get_post_id(self, comment_id: int) -> int:
        """Return the post a comment belongs to, or raise :class:`EarlyExit`."""
        try:
            return self._comments_to_posts[comment_id]
        except KeyError:
            raise EarlyExit(f"No post found for comment id {comment_id}") from None

    def update(self, comments: Comments) -> None:
        """Map the comments added since the input was last cleaned."""
        for comment in comments.new_comments():
            post_id = self._comments_to_posts.get(comment.parent_id, comment.parent_id)
            self._comments_to_posts[comment.id] = post_id