"""
GraphQL DataLoaders

Per-request batch loaders. Every Link.comments field resolved in one
response is collected into a single comments query.
"""

from strawberry.dataloader import DataLoader

from hackernews.models import Comment
from hackernews.services.store import CommentStore


class Loaders:
    def __init__(self, comments: CommentStore):
        self._comments = comments
        self.comments_by_link = DataLoader(load_fn=self.load_comments_by_link)

    async def load_comments_by_link(self, keys: list[int]) -> list[list[Comment]]:
        """Batch load comments for link IDs, preserving key order."""
        grouped = self._comments.find_by_link_ids(keys)
        return [grouped.get(key, []) for key in keys]
