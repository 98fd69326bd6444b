"""
Prompt text for product-name suggestions.
"""

PROMPT_TEMPLATE = (
    "Generate SEO friendly attractive name for a product titled {product_name} "
    "also make sure it is unique, catchy and accept all the SEO criteria. "
    "The response should only contains the lists not any tips or tricks "
    "only send the lists."
)


def build_prompt(product_name: str, template: str = PROMPT_TEMPLATE) -> str:
    """
    Fill the suggestion prompt for *product_name*.

    Raises:
        ValueError: If the name is empty or whitespace only.
    """
    name = (product_name or "").strip()
    if not name:
        raise ValueError("Product name must not be empty")
    return template.format(product_name=name)
