import logging

logger = logging.getLogger(__name__)

EMPTY_TREE_MESSAGE = "Tree is empty!"


class BSTNode:
    def __init__(self, key):
        self.key = key
        self.left = None
        self.right = None

    def __repr__(self):
        return f"BSTNode({self.key!r})"


class OrderedTree:
    """Unbalanced binary search tree over ordered scalar keys.

    Duplicates are ignored, and removing or looking up an absent key is a
    no-op rather than an error. Every walk is a loop or an explicit stack,
    so a degenerate (sorted-input) chain is as safe as a bushy tree.
    """

    def __init__(self, keys=()):
        self.root = None
        for key in keys:
            self.insert(key)

    def insert(self, key):
        """Insert `key`; returns False when it was already present."""
        if self.root is None:
            self.root = BSTNode(key)
        else:
            node = self.root
            while True:
                if key > node.key:
                    if node.right is None:
                        node.right = BSTNode(key)
                        break
                    node = node.right
                elif key < node.key:
                    if node.left is None:
                        node.left = BSTNode(key)
                        break
                    node = node.left
                else:
                    logger.debug("ignored duplicate key %r", key)
                    return False
        logger.debug("allocated node %r", key)
        return True

    def remove(self, key):
        """Remove `key`; returns False when it was not in the tree."""
        parent, node = None, self.root
        while node is not None:
            if key > node.key:
                parent, node = node, node.right
            elif key < node.key:
                parent, node = node, node.left
            else:
                break
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # two children: copy up the in-order predecessor, then unlink
            # the predecessor's own node, which has no right child
            parent, predecessor = node, node.left
            while predecessor.right is not None:
                parent, predecessor = predecessor, predecessor.right
            node.key = predecessor.key
            node = predecessor

        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        node.left = node.right = None
        logger.debug("released node %r", key)
        return True

    def _replace_child(self, parent, node, child):
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def clear(self):
        """Release every node, children before parents. Returns the count."""
        order = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(c for c in (node.left, node.right) if c is not None)
        # reversed pre-order (root, right, left) is a post-order
        for node in reversed(order):
            node.left = node.right = None
        self.root = None
        if order:
            logger.debug("tore down %d nodes", len(order))
        return len(order)

    teardown = clear

    def contains(self, key):
        node = self.root
        while node is not None:
            if key > node.key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return True
        return False

    def height(self):
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for node in level for c in (node.left, node.right) if c is not None]
        return height

    def in_order(self):
        """Yield keys lowest → highest."""
        return self._walk("left", "right")

    def reverse_order(self):
        """Yield keys highest → lowest."""
        return self._walk("right", "left")

    def _walk(self, first, second):
        stack, node = [], self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = getattr(node, first)
            else:
                node = stack.pop()
                yield node.key
                node = getattr(node, second)

    def render(self, indent=10):
        """Tree rotated 90°: right subtree above, left subtree below."""
        if self.root is None:
            return EMPTY_TREE_MESSAGE
        lines = []
        stack, node, depth = [], self.root, 0
        while stack or node is not None:
            if node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            else:
                node, depth = stack.pop()
                lines.append(" " * (depth * indent) + str(node.key))
                node, depth = node.left, depth + 1
        return "\n".join(lines)

    def print_tree(self, indent=10):
        print(self.render(indent))

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self):
        return self.in_order()

    def __reversed__(self):
        return self.reverse_order()

    def __len__(self):
        return sum(1 for _ in self.in_order())

    def __bool__(self):
        return self.root is not None

    def __repr__(self):
        return f"OrderedTree({list(self.in_order())!r})"
