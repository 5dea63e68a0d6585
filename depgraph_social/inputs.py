"""Input collections that remember which records arrived since the last clean."""

from typing import Iterator

from depgraph_social.models import Comment, Friend, Like, Post, User


class _KeyedRecords:
    """Records stored by id, with the ids added since the last clean."""

    def __init__(self) -> None:
        self._records: dict = {}
        self._new_ids: list = []
        self.generation = 0

    def _store(self, record) -> None:
        self._records[record.id] = record
        self._new_ids.append(record.id)
        self.generation += 1

    def _forget_new(self) -> None:
        self._new_ids.clear()

    def _iter_new(self) -> Iterator:
        return (self._records[record_id] for record_id in self._new_ids)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __getitem__(self, record_id: int):
        return self._records[record_id]


class Comments(_KeyedRecords):
    """All comments, and those added since the last clean."""

    def update(self, comment: Comment) -> None:
        """Store a comment and mark it as new."""
        self._store(comment)

    def clean(self) -> None:
        """Forget which comments are new."""
        self._forget_new()

    def new_comments(self) -> Iterator[Comment]:
        return self._iter_new()


class Posts(_KeyedRecords):
    """All posts, and those added since the last clean."""

    def update(self, post: Post) -> None:
        """Store a post and mark it as new."""
        self._store(post)

    def clean(self) -> None:
        """Forget which posts are new."""
        self._forget_new()

    def new_posts(self) -> Iterator[Post]:
        return self._iter_new()


class Users(_KeyedRecords):
    """All users, and those added since the last clean."""

    def update(self, user: User) -> None:
        """Store a user and mark it as new."""
        self._store(user)

    def clean(self) -> None:
        """Forget which users are new."""
        self._forget_new()

    def new_users(self) -> Iterator[User]:
        return self._iter_new()


class Likes:
    """Users who liked each comment, and the likes added since the last clean."""

    def __init__(self) -> None:
        self._user_likes_by_comment: dict = {}
        self._new_likes: list = []
        self.generation = 0

    def update(self, like: Like) -> None:
        self._user_likes_by_comment.setdefault(like.comment_id, set()).add(like.user_id)
        self._new_likes.append(like)
        self.generation += 1

    def clean(self) -> None:
        self._new_likes.clear()

    def new_likes(self) -> Iterator[Like]:
        return iter(self._new_likes)

    def __getitem__(self, comment_id: int) -> frozenset:
        return frozenset(self._user_likes_by_comment[comment_id])


class Friends:
    """Friendships in both directions, and those added since the last clean."""

    def __init__(self) -> None:
        self._friends: dict = {}
        self._new_friends: list = []
        self.generation = 0

    def _insert_friendship(self, user_id: int, friend_id: int) -> None:
        self._friends.setdefault(user_id, set()).add(friend_id)

    def update(self, friend: Friend) -> None:
        self._insert_friendship(friend.user_1_id, friend.user_2_id)
        self._insert_friendship(friend.user_2_id, friend.user_1_id)
        self._new_friends.append(friend)
        self.generation += 1

    def clean(self) -> None:
        self._new_friends.clear()

    def new_friends(self) -> Iterator[Friend]:
        return iter(self._new_friends)

    def friends_of(self, user_id: int) -> frozenset:
        """Ids of the friends of ``user_id``; empty if it has none."""
        return frozenset(self._friends.get(user_id, ()))