# depgraph-social

Nodes for incremental computation over a social network. Each input node
stores its records and remembers which of them arrived since it was last
cleaned, along with a generation counter that goes up on every update.
Derived nodes read only the new records, so they do not recompute
everything from scratch.

The package has no dependencies outside the standard library.

## Modules

- `depgraph_social.models`
  - Records: `User`, `Post`, `Comment`, `Like`, `Friend` and
    `ExpectedResult`, all frozen dataclasses.
  - `Update` pairs an `UpdateKind` (`USERS`, `POSTS`, `COMMENTS`, `LIKES`,
    `FRIENDS`) with a record.
  - `parse_timestamp` reads `YYYY-MM-DD HH:MM:SS` as a UTC `datetime`.
  - `model_from_fields` builds a record from positional text fields.
  - `parse_update` reads a change-set line whose first field names the
    record type.
  - `read_csv_file(path, model, delimiter=",")` reads a header-less CSV
    file of equal-length rows.
  - `read_csv_update(path)` reads a `|`-separated change set of mixed
    record types.
  - `expected_results(path)` reads a `;`-separated results table into a
    dict keyed by view, then change set, then iteration.
  - `RecordError`, a `ValueError`, is raised for malformed records.
    `EarlyExit` is raised by a computation that stops resolving early.
- `depgraph_social.inputs`
  - Input nodes `Comments`, `Posts`, `Users`, `Likes` and `Friends`. Each
    has `update(record)`, `clean()`, a `generation` counter, and an
    iterator over the records added since the last clean: `new_comments()`,
    `new_posts()`, `new_users()`, `new_likes()` and `new_friends()`.
  - `Comments`, `Posts` and `Users` can also be indexed by id and support
    `len` and `in`.
  - `Likes[comment_id]` gives the ids of the users who liked a comment.
  - `Friends.friends_of(user_id)` gives the ids of a user's friends. A
    friendship is recorded in both directions.
- `depgraph_social.comments_to_posts`
  - `CommentsToPosts` maps every comment to the post at the root of its
    thread.
  - `get_post_id` raises `EarlyExit` for an unknown comment.
- `depgraph_social.post_scores_query`
  - `PostScoresQuery` keeps running post scores: each comment scores 10
    and each like scores 1.
  - It tracks the top three posts, ranked by score, then timestamp, then
    id. `top_posts()` renders them best first as `id|id|id`.
- `depgraph_social.social`
  - `TopPostsGraph` wires the nodes above together.
  - Feed data in with `update_comments`, `update_posts` and
    `update_likes`. `apply_updates` applies only the post and comment
    updates in an iterable of `Update` and ignores the other kinds.
  - `resolve()` recomputes only the derived nodes whose inputs changed,
    cleans the inputs, and returns the `PostScoresQuery`.
- `depgraph_social.maths`
  - `NumberValueI32` and `NumberValueI8` are range-checked integers.
  - `square`, `multiply` and `total(*numbers)` return a `NumberValueI32`.
    `total` needs at least two numbers.
  - A result outside the i32 range raises `OverflowError`.
- `depgraph_social.numbers`
  - `SomeNumber` is an i32 value and `AnotherNumber` is an i64 value.
  - The operations are `square`, `multiply`, `add`, `subtract`, and `cube`,
    which returns an `AnotherNumber`.
  - `check_all_is_ok` raises `EarlyExit` once a value reaches 100.
  - `StuffToBuy.check_bank_balance(time, balance, balance_changed)` sets a
    new purchase amount of a tenth of the balance. It does so only when
    the balance changed and more than a day has passed since the last
    purchase.
- `depgraph_social.sequences`
  - `Sequence` is a plain growing list.
  - `EfficientSequence` remembers which values were appended since its
    last `clean()` and yields them from `iter_dirty()`.
  - `SequenceTotals.update` sums the plain sequence in full and adds only
    the new values of the efficient one.
- `depgraph_social.orders`
  - An order book of `OrderOperation`, `OpenOrders`, `RiskLimit`,
    `ExpensiveCalculation` and `DecisionNode`.
  - `simulate(iterations=11, max_orders=5)` cancels the oldest order
    whenever the risk limit is reached, and otherwise adds a new one.
  - It returns a list of `(decision, open orders)` pairs, one for each
    iteration.

## Example

```python
from depgraph_social.inputs import Posts
from depgraph_social.models import Post, parse_timestamp

posts = Posts()
posts.update(Post(id=42, ts=parse_timestamp("2010-01-01 12:00:00"),
                  content="hello", submitted_id=1))

print([post.id for post in posts.new_posts()])  # [42]
posts.clean()
print(list(posts.new_posts()))                  # []
```

Feeding the top-posts query:

```python
from depgraph_social.models import Comment, Like, Post, parse_timestamp
from depgraph_social.social import TopPostsGraph

ts = parse_timestamp("2010-01-01 12:00:00")
graph = TopPostsGraph()
graph.update_posts(Post(id=1, ts=ts, content="post", submitted_id=7))
graph.update_comments(Comment(id=2, ts=ts, content="reply", submitted_id=8, parent_id=1))
graph.update_likes(Like(user_id=9, comment_id=2))
print(graph.resolve().top_posts())  # 1
```

Resolving raises `EarlyExit` in two cases: a like refers to a comment
that is not known yet, or a comment's thread leads to a post that is not
known yet.

## What it does not do

- The package has no command-line program.
- It ships no data sets. You supply the CSV files to the readers.
- `TopPostsGraph` is a fixed wiring of the top-posts nodes. It is not a
  general tool for building graphs, and it cannot render a graph as
  Graphviz.

## Tests

The test suite uses pytest, which the `test` extra installs:

```
pip install -e .[test]
pytest
```