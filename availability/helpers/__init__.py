from availability.helpers.templating import register_template_helpers

__all__ = ["register_template_helpers"]
