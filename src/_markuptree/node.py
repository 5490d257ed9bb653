from dataclasses import dataclass, field


@dataclass
class Node:
    """
    An element of the tree built from the tokens of a markup document.

    :param tag: The tag name, empty for the synthetic root.
    :param depth: Depth of the tag stack when the tag was opened, starting
        at 1. The root starts out with depth 0.
    """

    tag: str = ""
    depth: int = 0
    children: list = field(default_factory=list)
    attributes: dict = field(default_factory=dict)
    text: str = ""

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def set_text(self, text):
        self.text = text

    def is_empty(self):
        return not self.children and not self.attributes and not self.text

    def __str__(self):
        children = ", ".join(str(c) for c in self.children)
        return f"{{ tag: {self.tag}, depth: {self.depth}, children: [{children}] }}"
