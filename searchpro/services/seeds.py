"""Default suggestion catalogue."""

from __future__ import annotations

from searchpro.domain.models import Item

DEFAULT_ITEM_NAMES: tuple[str, ...] = (
    "React Query",
    "React Hooks",
    "React Router",
    "React State Management",
    "React Performance Optimization",
    "React Tutorial",
    "React Best Practices",
    "React vs Vue",
    "React Interview Questions",
    "React Roadmap",
    "Next.js Server Components",
    "Next.js API Routes",
    "Next.js Middleware",
    "Next.js Authentication",
    "Next.js Performance Optimization",
    "Next.js Tutorial",
    "Next.js vs React",
    "Next.js SEO Best Practices",
    "Next.js Roadmap",
    "Next.js Interview Questions",
    "TypeScript Basics",
    "TypeScript Interfaces",
    "TypeScript Generics",
    "TypeScript Utility Types",
    "TypeScript vs JavaScript",
    "TypeScript Tutorial",
    "TypeScript Best Practices",
    "TypeScript Roadmap",
    "TypeScript Interview Questions",
    "TypeScript Performance Optimization",
    "Node.js Streams",
    "Node.js Event Loop",
    "Node.js File System",
    "Node.js Authentication",
    "Node.js WebSockets",
    "Node.js Tutorial",
    "Node.js Best Practices",
    "Node.js vs Deno",
    "Node.js Performance Optimization",
    "Node.js Interview Questions",
    "Redux Toolkit",
    "Redux Middleware",
    "Redux Thunk",
    "Redux Saga",
    "Redux vs Context API",
    "Redux Tutorial",
    "Redux Best Practices",
    "Redux Performance Optimization",
    "Redux Interview Questions",
    "Redux Roadmap",
    "Tailwind CSS Grid",
    "Tailwind CSS Flexbox",
    "Tailwind CSS Animations",
    "Tailwind CSS Responsive Design",
    "Tailwind CSS Dark Mode",
    "Tailwind CSS Tutorial",
    "Tailwind CSS Best Practices",
    "Tailwind CSS vs Bootstrap",
    "Tailwind CSS Performance Optimization",
    "Tailwind CSS Interview Questions",
)


def default_items() -> tuple[Item, ...]:
    """Catalogue items numbered from 1 in declaration order."""

    return tuple(
        Item(id=index, name=name) for index, name in enumerate(DEFAULT_ITEM_NAMES, start=1)
    )


__all__ = ["DEFAULT_ITEM_NAMES", "default_items"]
