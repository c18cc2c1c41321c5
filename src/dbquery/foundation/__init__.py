"""Foundation: outcome types, structured errors, configuration."""
