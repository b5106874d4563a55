"""Settlement API: GraphQL service over the fxsettle library."""
