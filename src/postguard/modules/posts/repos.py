"""Post repository."""

from postguard.modules.posts.models import Post


class PostRepository:
    """In-memory repository for posts.

    Stands in for whatever persistence layer owns the data. Results are
    returned oldest first, the order posts were created in.
    """

    def __init__(self) -> None:
        self._posts: dict[str, Post] = {}

    async def create(self, post: Post) -> Post:
        """Store a new post.

        Args:
            post: Post instance to store

        Returns:
            The stored post
        """
        self._posts[post.id] = post
        return post

    async def get_by_id(self, post_id: str) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: The post's ID

        Returns:
            Post if found, None otherwise
        """
        return self._posts.get(post_id)

    async def list_all(self) -> list[Post]:
        """List every stored post."""
        return list(self._posts.values())

    async def list_by_author(self, author_id: str) -> list[Post]:
        """List posts written by one author.

        Args:
            author_id: The author's ID

        Returns:
            The author's posts
        """
        return [post for post in self._posts.values() if post.author_id == author_id]

    async def update(self, post: Post) -> Post:
        """Replace a stored post with an updated copy.

        Args:
            post: Post instance with updated fields

        Returns:
            The updated post
        """
        self._posts[post.id] = post
        return post

    async def delete(self, post: Post) -> None:
        """Delete a post.

        Args:
            post: Post instance to delete
        """
        self._posts.pop(post.id, None)
