"""watsoncli -- a command-line front-end for the Watson family of HTTP services.

Every remote operation is exposed as ``watson <service> <operation> --flags``.
The commands are not hand written: each service module declares its
operations as immutable descriptors, and a generic engine turns those
descriptors into Typer commands, binds the flags the user actually typed,
performs one HTTP request, and renders the response.

Typical usage::

    watson language-translator-v3 translate --version 2018-05-01 \\
        --text "Hello" --model_id en-es --output json

Modules:
    app: Typer application and the ``watson`` entry point.
    models: Pydantic descriptor and configuration models.
    binder: Flag-to-request-field binding.
    invoker: Generic HTTP invoker.
    query: JMESPath projection.
    table: Table discovery over arbitrary value trees.
    renderer: JSON / YAML / table rendering and binary output.
    output: stdout/stderr discipline with Rich support.
    pipeline: Auth, bind, invoke, project and render for one invocation.
"""

__version__ = "0.0.2"
