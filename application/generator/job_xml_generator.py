# application/generator/job_xml_generator.py
from __future__ import annotations

from typing import List, Optional

from application.generator.render_context import RenderContext
from application.generator.renderer_registry import RendererRegistry
from application.generator.renderers.common import write_listeners, write_properties
from application.generator.xml_writer import Attr, XmlLineWriter
from domain.job import JobConfiguration
from domain.job_document import (
    JOB_NAMESPACE,
    JOB_ROOT_TAG,
    JOB_SCHEMA_VERSION,
    XML_DECLARATION,
)


class JobXmlGenerator:
    """
    Turns a JobConfiguration into job XML text.

    Generation is permissive: missing optional values are left out and
    nothing is checked for completeness. Run the validator on the result
    to find out whether the document is usable.
    """

    def __init__(self, registry: Optional[RendererRegistry] = None):
        self._registry = registry or RendererRegistry.default()

    def generate(self, config: JobConfiguration) -> str:
        writer = XmlLineWriter()
        writer.raw(XML_DECLARATION)
        writer.open(JOB_ROOT_TAG, self._root_attrs(config))

        write_properties(writer, config.properties)
        write_listeners(writer, config.listeners)

        ctx = RenderContext(job=config, writer=writer, registry=self._registry)
        ctx.render_steps(config.steps)

        writer.close(JOB_ROOT_TAG)
        return writer.text()

    def _root_attrs(self, config: JobConfiguration) -> List[Attr]:
        attrs: List[Attr] = [
            ("id", config.name),
            ("xmlns", JOB_NAMESPACE),
            ("version", JOB_SCHEMA_VERSION),
        ]
        if config.restart_policy is not None:
            attrs.append(("restartable", config.restart_policy.restartable))
        return attrs


def generate_job_xml(config: JobConfiguration) -> str:
    return JobXmlGenerator().generate(config)
