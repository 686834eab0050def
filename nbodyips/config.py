class _ConfigClass:
    """
    nbodyips configuration

    This class contains default parameters for dictionaries, basis
    generation and assembly of the basis evaluated over many configurations.
    Defaults can be changed globally e.g.
    ```
    from nbodyips.config import Config

    Config.n_cores = 8
    Config.dictionary_params = {'transform': 'poly(-1)',
                                'cutoff': 'cos(4.0, 5.5)'}
    ```
    """

    n_cores = 4

    # Default distance transform and cut-off envelope
    dictionary_params = {
        'transform': 'poly(-1)',  # r -> 1/r
        'cutoff': 'cos(4.0, 5.5)',  # Å
    }

    # Maximum total polynomial degree for each body order
    basis_params = {
        2: 14,
        3: 8,
        4: 6,
        5: 5,
    }

    def max_degree(self, body_order: int) -> int:
        """Default maximum total degree of a basis with a given body order"""

        try:
            return self.basis_params[body_order]

        except KeyError:
            raise ValueError(
                f'No default degree for a {body_order}-body basis. '
                f'Available body orders: {list(self.basis_params)}'
            )


# Singleton instance of the configuration
Config = _ConfigClass()
