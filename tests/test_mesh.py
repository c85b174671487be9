from voxelcraft.mesh import MeshData, Vertex


def _quad():
    return [
        Vertex(position=(0.0, 0.0, 0.0), tex_coord=(0.0, 0.0), normal=(0.0, 1.0, 0.0)),
        Vertex(position=(1.0, 0.0, 0.0), tex_coord=(1.0, 0.0), normal=(0.0, 1.0, 0.0)),
        Vertex(position=(1.0, 0.0, 1.0), tex_coord=(1.0, 1.0), normal=(0.0, 1.0, 0.0)),
        Vertex(position=(0.0, 0.0, 1.0), tex_coord=(0.0, 1.0), normal=(0.0, 1.0, 0.0)),
    ]


def test_new_mesh_is_empty():
    mesh = MeshData()
    assert mesh.empty() is True
    assert mesh.indices == []


def test_mesh_with_vertices_is_not_empty():
    mesh = MeshData(vertices=_quad(), indices=[0, 1, 2, 0, 2, 3])
    assert mesh.empty() is False
    assert len(mesh.vertices) == 4


def test_clear_removes_everything():
    mesh = MeshData(vertices=_quad(), indices=[0, 1, 2, 0, 2, 3])
    mesh.clear()
    assert mesh.empty() is True
    assert mesh.vertices == []
    assert mesh.indices == []


def test_meshes_do_not_share_lists():
    a = MeshData()
    b = MeshData()
    a.vertices.append(Vertex())
    assert b.empty() is True


def test_vertex_fields_round_trip():
    v = Vertex(position=(1.0, 2.0, 3.0), tex_coord=(0.5, 0.25),
               tex_index=7.0, normal=(0.0, 0.0, -1.0), ao=0.4)
    assert v.position == (1.0, 2.0, 3.0)
    assert v.tex_coord == (0.5, 0.25)
    assert v.tex_index == 7.0
    assert v.normal == (0.0, 0.0, -1.0)
    assert v.ao == 0.4