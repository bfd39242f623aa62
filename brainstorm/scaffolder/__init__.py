"""BrainstormBuddy scaffolder -- renders an illustrative code scaffold.

Takes a ``ProjectAnalysis`` and produces a single text document with a
package manifest, frontend and backend stubs, a relational schema, an API
reference and deployment configuration.

Quick usage::

    from brainstorm.scaffolder import ScaffoldGenerator, to_scaffold

    text = to_scaffold(analysis, "A marketplace for used books")
    path = await ScaffoldGenerator(analysis, idea).write("./out")
"""

from brainstorm.scaffolder.generator import ScaffoldGenerator, to_scaffold
from brainstorm.scaffolder.templates import TemplateRenderer, package_slug, sql_identifier

__all__ = [
    "ScaffoldGenerator",
    "TemplateRenderer",
    "package_slug",
    "sql_identifier",
    "to_scaffold",
]
