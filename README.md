# mercadofinger

This package provides data structures for a small store and a command
interpreter to try them out. It covers:

- dates (`mercadofinger.fecha.Fecha`), with day arithmetic (`aumentar`),
  comparison (`comparar` and the ordering operators) and parsing of
  `dd/mm/aaaa` text (`Fecha.parse`);
- clients (`mercadofinger.cliente.Cliente`) and groups of clients kept in
  a binary search tree ordered by id (`mercadofinger.clientes_abb.ClientesABB`).
  A group reports its height, the largest id, the average age and the
  n-th client by id;
- branches (`mercadofinger.clientes_sucursales.ClientesSucursales`). This
  is a sequence of client groups ordered by average age. It can also find
  the client that appears in the most groups (`cliente_mas_repetido`);
- products (`mercadofinger.producto.Producto`) and shopping carts ordered
  by product id (`mercadofinger.carrito_productos.CarritoProductos`);
- bounded sets of product ids
  (`mercadofinger.conjunto_productos.ConjuntoProductos`). A set only holds
  ids from 0 up to its maximum, exclusive. It supports `union`,
  `interseccion` and `diferencia`;
- promotions (`mercadofinger.promocion.Promocion`) and lists of promotions
  ordered by start date (`mercadofinger.lista_promociones.ListaPromociones`);
- a history (`mercadofinger.historial.Historial`). It files promotions as
  finished, active or upcoming against a current date, and sorts them
  again when the date moves forward (`avanzar_a`).

## Installation

```
pip install .
```

The package needs Python 3.10 or later. It uses only the standard library.

## The command interpreter

```
mercadofinger < comandos.txt
mercadofinger comandos.txt
```

The interpreter reads commands from the file you name, or from standard
input if you name none. It prints a welcome line, then a numbered prompt
before each command.

Each line holds a command name followed by its parameters, separated by
spaces. Dates are written as `dd/mm/aaaa`. The line `# some text` echoes
the comment. `Fin`, or the end of the input, ends the session. An unknown
name prints `Comando no reconocido.`

If a command fails, the interpreter stops and writes `error: ...` to
standard error, and `main` returns exit status 1. A command fails, for
example, when it uses an object that has not been created yet.

A short session:

```
crearFecha 1/1/2024
crearProducto 3 Yerba 250
imprimirProducto
crearConjuntoProductos 10
insertarConjuntoProductos 3
insertarConjuntoProductos 7
imprimirConjuntoProductos
Fin
```

The commands come in families, one per structure:

| Structure | Commands |
| --- | --- |
| dates | `crearFecha`, `imprimirFecha`, `aumentarDias`, `compararFechas` |
| products | `crearProducto`, `imprimirProducto`, `idProducto` |
| carts | `crearCarritoProductos`, `agregarCarritoProductos`, `removerDeCarritoProductos` |
| clients | `crearCliente`, `imprimirCliente`, `copiarCliente` |
| client groups | `crearClientesABB`, `agregarAClientesABB`, `alturaClientesABB`, `obtenerNesimoClienteClientesABB` |
| branches | `crearClientesSucursalesLDE`, `agregarAClientesSucursalesLDE`, `clienteMasRepetido` |
| product sets | `crearConjuntoProductos`, `unionConjuntoProductos`, `interseccionConjuntoProductos` |
| promotions | `crearPromocion`, `agregarAPromocion`, `sonPromocionesCompatibles` |
| promotion lists | `crearListaPromociones`, `obtenerPromocionesActivas`, `unirListaPromociones` |
| history | `crearHistorial`, `agregarPromocionHistorial`, `avanzarAFechaHistorial` |

The table lists some of each family; each family has more commands than
shown. The complete tables are returned by these functions:

- `mercadofinger.comandos_base.comandos_base`
- `mercadofinger.comandos_clientes.comandos_clientes`
- `mercadofinger.comandos_sucursales.comandos_sucursales`
- `mercadofinger.comandos_promociones.comandos_promociones`
- `mercadofinger.cli.comandos_listas`

## Using it from Python

```python
import io
from mercadofinger.cli import ejecutar

salida = io.StringIO()
ejecutar(io.StringIO("crearFecha 28/2/2024\naumentarDias 2\nFin\n"), salida)
print(salida.getvalue())
```

The classes can also be used directly:

```python
from mercadofinger.fecha import Fecha
from mercadofinger.conjunto_productos import ConjuntoProductos

fecha = Fecha.parse("28/2/2024")
fecha.aumentar(2)            # now 1/3/2024

ids = ConjuntoProductos(10)
ids.insertar(7)
ids.insertar(29)             # out of range, ignored
print(ids.formatear())       # "7 \n"
```

## What it does not do

All data lives in memory for the length of one run. Nothing is saved to
or loaded from disk, and there is no database or network service.

When a group is added to the branch collection, the interpreter gives it
a random branch number. No command reads or prints that number.