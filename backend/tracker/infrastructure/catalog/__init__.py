from .yaml_catalog_loader import load_catalog, load_tips

__all__ = ["load_catalog", "load_tips"]
