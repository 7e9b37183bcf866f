from application.generator.job_xml_generator import JobXmlGenerator, generate_job_xml

__all__ = ["JobXmlGenerator", "generate_job_xml"]
