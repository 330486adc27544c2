"""Command-bar commands and the registry that dispatches them."""