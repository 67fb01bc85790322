"""Built-in tools: help and version commands, model helpers and the template generator."""