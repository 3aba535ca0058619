"""Collection of field violations and validation errors with an RPC status form."""