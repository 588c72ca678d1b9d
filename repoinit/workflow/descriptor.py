"""Description of the repository being provisioned."""

from dataclasses import dataclass, field

from repoinit.integrations.templates import NO_TEMPLATE


@dataclass
class RepositoryDescriptor:
    """Everything the user chose for the new repository.

    Attributes:
        name: Repository name (non-empty)
        private: Create a private repository instead of a public one
        template: Selected .gitignore template, or NO_TEMPLATE
        readme_lines: README body lines entered by the user
    """

    name: str
    private: bool = False
    template: str = NO_TEMPLATE
    readme_lines: list[str] = field(default_factory=list)

    @property
    def visibility_flag(self) -> str:
        """Visibility flag for 'gh repo create'."""
        return "--private" if self.private else "--public"

    @property
    def has_template(self) -> bool:
        return self.template != NO_TEMPLATE

    def readme_text(self) -> str:
        """Render the README content.

        Just the heading when no lines were entered, otherwise the heading,
        a blank line and the entered lines.
        """
        heading = f"# {self.name}"
        if not self.readme_lines:
            return heading + "\n"
        return heading + "\n\n" + "\n".join(self.readme_lines) + "\n"


__all__ = ["RepositoryDescriptor"]
