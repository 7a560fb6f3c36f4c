"""Knowledge base builder - assembled content to flat authoritative text.

The output is the assistant's only source of facts. Rules:

* the same content always yields byte-identical text;
* a section or field without data is left out, never rendered as a
  placeholder;
* project URLs come only from ``project_url``.
"""

from typing import Any

# Fixed section order of the knowledge base.
SECTION_ORDER = (
    "identity",
    "projects",
    "services",
    "tech_stack",
    "why_us",
    "leadership",
    "contact",
    "page_links",
    "admin_links",
)


def _text(value: Any) -> str:
    """Scalar as trimmed text; containers and None become empty."""
    if value is None or isinstance(value, (dict, list, tuple)):
        return ""
    return str(value).strip()


def _section(content: dict, key: str) -> dict:
    value = content.get(key)
    return value if isinstance(value, dict) else {}


def _items(section: dict, key: str = "items") -> list:
    value = section.get(key)
    return value if isinstance(value, list) else []


def _titled_line(item: dict, title_key: str = "title", desc_key: str = "desc") -> str:
    """'- title: desc' with whichever half exists; empty when neither does."""
    title = _text(item.get(title_key))
    desc = _text(item.get(desc_key))
    if title and desc:
        return f"- {title}: {desc}"
    if title or desc:
        return f"- {title or desc}"
    return ""


def _block(heading: str, lines: list[str]) -> str | None:
    lines = [line for line in lines if line]
    if not lines:
        return None
    return "\n".join([heading, *lines])


class KnowledgeBaseBuilder:
    """Deterministic serializer for one language's assembled content."""

    def __init__(self, site_base_url: str):
        self._base = site_base_url.rstrip("/")

    def project_url(self, project: dict, index: int) -> str:
        """Canonical case study URL: id when set, else position in the list."""
        project_id = _text(project.get("id")) or str(index)
        return f"{self._base}/project/{project_id}"

    def _projects(self, content: dict) -> list[tuple[dict, str]]:
        items = _items(_section(content, "projects"))
        return [(p, self.project_url(p, i)) for i, p in enumerate(items) if isinstance(p, dict)]

    # ---- sections, in SECTION_ORDER ----

    def _identity(self, content: dict) -> str | None:
        hero = _section(content, "hero")
        parts = []
        if title := _text(hero.get("title")):
            parts.append(title)
        if tagline := _text(hero.get("tagline")):
            parts.append(f'Tagline: "{tagline}"')
        if subtitle := _text(hero.get("subtitle")):
            parts.append(f"Mission: {subtitle}")
        if not parts:
            return None
        return "IDENTITY & MISSION: " + ". ".join(parts)

    def _projects_block(self, content: dict) -> str | None:
        lines = []
        for project, url in self._projects(content):
            head = _titled_line(project)[2:]
            tags = ", ".join(t for t in (_text(tag) for tag in _items(project, "tags")) if t)
            if tags:
                head = f"{head} (Built with: {tags})" if head else f"Built with: {tags}"
            lines.append(f"- {head} | Case Study Link: {url}" if head else f"- Case Study Link: {url}")
        return _block("COMPLETED PORTFOLIO PROJECTS:", lines)

    def _services(self, content: dict) -> str | None:
        items = _items(_section(content, "services"))
        return _block("CORE AGENCY SERVICES:", [_titled_line(s) for s in items if isinstance(s, dict)])

    def _tech_stack(self, content: dict) -> str | None:
        ts = _section(content, "techStack")
        lines = []
        summary = ". ".join(p for p in (_text(ts.get("title")), _text(ts.get("subtitle"))) if p)
        if summary:
            lines.append(f"CORE TECHNOLOGIES: {summary}")
        names = []
        for item in _items(ts):
            name = _text(item.get("name")) if isinstance(item, dict) else _text(item)
            if name:
                names.append(name)
        if names:
            lines.append("STACK DETAILS: " + ", ".join(names))
        return "\n".join(lines) if lines else None

    def _why_us(self, content: dict) -> str | None:
        items = _items(_section(content, "whyUs"))
        return _block("AGENCY VALUE PROPOSITION (WHY US):", [_titled_line(w) for w in items if isinstance(w, dict)])

    def _leadership(self, content: dict) -> str | None:
        members = _items(_section(content, "leadership"), "members")
        lines = [_titled_line(m, "name", "role") for m in members if isinstance(m, dict)]
        return _block("OFFICIAL LEADERSHIP TEAM:", lines)

    def _contact(self, content: dict) -> str | None:
        contact = _section(content, "contact")
        footer = _section(content, "footer")
        lines = []

        cta, title = _text(contact.get("cta")), _text(contact.get("title"))
        if cta and title:
            lines.append(f"- Contact Action: {cta} ({title})")
        elif cta or title:
            lines.append(f"- Contact Action: {cta or title}")

        if tagline := _text(footer.get("tagline")):
            lines.append(f"- Brand Statement: {tagline}")

        socials = []
        for social in _items(footer, "socials"):
            if not isinstance(social, dict) or not social.get("enabled"):
                continue
            url = _text(social.get("url"))
            if url:
                platform = _text(social.get("platform"))
                socials.append(f"  * {platform}: {url}" if platform else f"  * {url}")
        if socials:
            lines.append("- Social Links:")
            lines.extend(socials)

        return _block("CONTACT & SOCIAL PRESENCE:", lines)

    def _page_links(self, content: dict) -> str:
        lines = [
            f"- Homepage: {self._base}/",
            f"- All Projects: {self._base}/projects",
        ]
        for project, url in self._projects(content):
            title = _text(project.get("title"))
            lines.append(f"- {title} Case Study: {url}" if title else f"- Case Study: {url}")
        return _block("NATIVE WEBSITE PAGE LINKS (use these EXACT URLs, never make up URLs):", lines)

    def _admin_links(self, content: dict) -> str | None:
        lines = []
        for item in _items(_section(content, "links")):
            if not isinstance(item, dict):
                continue
            link = _text(item.get("link"))
            if not link:
                continue
            title = _text(item.get("title"))
            lines.append(f'- Use this link for "{title}": {link}' if title else f"- {link}")
        return _block("IMPORTANT LINKS TO SHARE WITH USERS:", lines)

    # ---- public API ----

    def build(self, content: dict[str, Any], live_stats: str | None = None) -> str:
        """Serialize content; live_stats is appended after every section."""
        renderers = {
            "identity": self._identity,
            "projects": self._projects_block,
            "services": self._services,
            "tech_stack": self._tech_stack,
            "why_us": self._why_us,
            "leadership": self._leadership,
            "contact": self._contact,
            "page_links": self._page_links,
            "admin_links": self._admin_links,
        }
        blocks = [renderers[name](content) for name in SECTION_ORDER]
        if live_stats and live_stats.strip():
            blocks.append(live_stats.strip())
        return "\n\n".join(b for b in blocks if b) + "\n"

    @staticmethod
    def live_stats_fragment(lead_count: int | None) -> str | None:
        if lead_count is None:
            return None
        return f"LIVE STATS:\n- Waitlist signups so far: {lead_count}"

    @staticmethod
    def qa_pairs(content: dict[str, Any]) -> str | None:
        """Chatbot Q&A pairs as 'Q: ...\\nA: ...' blocks."""
        pairs = []
        for qa in _items(_section(content, "chatbot"), "qaPairs"):
            if not isinstance(qa, dict):
                continue
            question, answer = _text(qa.get("question")), _text(qa.get("answer"))
            if question and answer:
                pairs.append(f"Q: {question}\nA: {answer}")
        return "\n\n".join(pairs) or None

    @staticmethod
    def system_prompt(content: dict[str, Any]) -> str | None:
        return _text(_section(content, "chatbot").get("systemPrompt")) or None
