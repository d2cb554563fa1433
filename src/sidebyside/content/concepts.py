"""Concept index: one card per concept page."""

from sidebyside.views import CardGrid, ContentCard, Page, Prose


def _icon(path: str) -> str:
    return (
        '<svg class="icon" fill="none" stroke="currentColor" viewBox="0 0 24 24" '
        'aria-hidden="true"><path stroke-linecap="round" stroke-linejoin="round" '
        f'stroke-width="1.5" d="{path}"/></svg>'
    )


CONCEPTS = (
    ContentCard(
        title="Classes",
        description="Defining, instantiating, and using classes across 5 languages",
        href="/concepts/classes",
        icon=_icon(
            "M20 7l-8-4-8 4m16 0l-8 4m8-4v10l-8 4m0-10L4 7m8 4v10M4 7v10l8 4"
        ),
    ),
    ContentCard(
        title="Inheritance & Polymorphism",
        description="Type hierarchies, method overriding, and SOLID principles in TypeScript",
        href="/concepts/inheritance",
        icon=_icon(
            "M8.25 14.25h7.5m-7.5 3H12M10.5 2.25H5.625c-.621 0-1.125.504-1.125 "
            "1.125v17.25c0 .621.504 1.125 1.125 1.125h12.75c.621 0 1.125-.504 "
            "1.125-1.125V11.25a9 9 0 00-9-9z"
        ),
    ),
    ContentCard(
        title="GUI Programming",
        description="Building interfaces with React - components, state, events, and modals",
        href="/concepts/gui",
        icon=_icon(
            "M9 17.25v1.007a3 3 0 01-.879 2.122L7.5 21h9l-.621-.621A3 3 0 0115 "
            "18.257V17.25m6-12V15a2.25 2.25 0 01-2.25 2.25H5.25A2.25 2.25 0 013 "
            "15V5.25A2.25 2.25 0 015.25 3h13.5A2.25 2.25 0 0121 5.25z"
        ),
    ),
    ContentCard(
        title="File Persistence",
        description="Reading, writing, and processing files with real-world image pipelines",
        href="/concepts/file-persistence",
        icon=_icon(
            "M19.5 14.25v-2.625a3.375 3.375 0 00-3.375-3.375h-1.5A1.125 1.125 0 "
            "0113.5 7.125v-1.5a3.375 3.375 0 00-3.375-3.375H8.25"
        ),
    ),
    ContentCard(
        title="Database Persistence",
        description="Connections, CRUD, migrations, and SQL injection prevention",
        href="/concepts/database",
        icon=_icon(
            "M20.25 6.375c0 2.278-3.694 4.125-8.25 4.125S3.75 8.653 3.75 6.375m16.5 "
            "0c0-2.278-3.694-4.125-8.25-4.125S3.75 4.097 3.75 6.375m16.5 0v11.25c0 "
            "2.278-3.694 4.125-8.25 4.125s-8.25-1.847-8.25-4.125V6.375"
        ),
    ),
    ContentCard(
        title="Web Research",
        description="Three real problems that required deep research to solve",
        href="/concepts/web-research",
        icon=_icon(
            "M12 21a9.004 9.004 0 008.716-6.747M12 21a9.004 9.004 0 01-8.716-6.747"
            "M12 21c2.485 0 4.5-4.03 4.5-9S14.485 3 12 3m0 18c-2.485 0-4.5-4.03-4.5-9"
            "S9.515 3 12 3"
        ),
    ),
)


def concepts_index() -> Page:
    return Page(
        title="OOP Concepts",
        description=(
            "OOP concepts demonstrated across multiple languages: classes, "
            "inheritance, GUI programming, file and database persistence, and web "
            "research."
        ),
        body=(
            Prose(
                "<h1>OOP Concepts</h1>\n"
                "<p>Object-oriented programming demonstrated across real projects "
                "and multiple languages. Not textbook examples: real code solving "
                "real problems.</p>"
            ),
            CardGrid(CONCEPTS, heading="Topics"),
        ),
    )
