"""Interactive campus navigation console and the CSV files it reads and writes."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

from campusnav.algorithms import (
    connection_suggestions,
    has_euler_circuit,
    is_connected,
    minimum_spanning_tree,
    plan_teaching_visit,
    shortest_path,
    topological_shortest_path,
)
from campusnav.graph import GraphError, LGraph, LocationInfo

DEFAULT_NODES = "nodes.csv"
DEFAULT_EDGES = "edges.csv"
STORED_NODES = "test_nodes.csv"
STORED_EDGES = "test_edges.csv"
GATES = (
    "Gate_788_Zaoyang_Road",
    "Gate_460_Zaoyang_Road",
    "Jinshajiang_Road_Gate",
)

MAIN_MENU = (
    "欢迎使用校园导航系统！\n"
    "请选择您要进行的操作：\n"
    "1.顶点相关操作\n"
    "2.边相关操作\n"
    "3.从文件中重新加载点与边\n"
    "4.判定图是否连通并建议添加道路\n"
    "5.是否存在欧拉通路\n"
    "6.求任意两点间的最短距离\n"
    "7.求最小生成树\n"
    "8.求解拓扑受限时的最短路径\n"
    "9.从校门出发参观所有教学楼的路径规划\n"
    "10.退出程序\n"
    "请输入操作前的数字："
)

VERTEX_MENU = (
    "顶点相关操作：\n"
    "1.输出特定顶点信息\n"
    "2.输出所有顶点信息\n"
    "3.添加一个顶点\n"
    "4.删除一个顶点\n"
    "5.存储顶点到文件中\n"
    "6.修改地点参观时间\n"
    "7.按照类别查找地点\n"
    "8.回到上一级菜单\n"
    "请输入操作前的数字："
)

EDGE_MENU = (
    "边相关操作：\n"
    "1.输出特定边信息\n"
    "2.输出所有边信息\n"
    "3.添加一条边\n"
    "4.删除一条边\n"
    "5.存储边到文件中\n"
    "6.修改边权重\n"
    "7.按地点查找相关道路\n"
    "8.回到上一级菜单\n"
    "请输入操作前的数字："
)

FAREWELL = "感谢您的使用，再见！"


@dataclass(frozen=True)
class Road:
    """One line of the edges file: two location names and the distance between them."""

    source: str
    dest: str
    length: int


def _fields(path: str | Path):
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.replace(",", " ").split()
            if fields:
                yield fields


def read_nodes(path: str | Path) -> list[LocationInfo]:
    """Read ``name,type,visit_time`` lines into location records."""
    return [
        LocationInfo(name, int(visit_time), type_)
        for name, type_, visit_time, *_ in _fields(path)
    ]


def read_edges(path: str | Path) -> list[Road]:
    """Read ``from,to,length`` lines into roads."""
    return [
        Road(source, dest, int(length)) for source, dest, length, *_ in _fields(path)
    ]


def load_graph(graph: LGraph, nodes_path: str | Path, edges_path: str | Path) -> LGraph:
    """Insert the locations and roads from the two files into ``graph`` and return it."""
    nodes = read_nodes(nodes_path)
    roads = read_edges(edges_path)
    for info in nodes:
        graph.insert_vertex(info)
    for road in roads:
        graph.insert_edge(road.source, road.dest, road.length)
    return graph


def format_nodes(graph: LGraph) -> list[str]:
    """One ``name,type,visit_time`` line per location, ordered by name."""
    lines = []
    for name in graph.names():
        info = graph.get_vertex(name)
        lines.append(f"{info.name},{info.type},{info.visit_time}")
    return lines


def format_edges(graph: LGraph) -> list[str]:
    """One ``from,to,length`` line per road, ordered by length."""
    return [
        f"{graph.vertex_by_id(e.source).name},{graph.vertex_by_id(e.dest).name},{e.weight}"
        for e in graph.sorted_edges()
    ]


def _write_lines(path: str | Path, lines: list[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def store_nodes(path: str | Path, graph: LGraph) -> None:
    """Write the locations in vertex-id order in the nodes file format."""
    ordered = sorted(graph.names().values())
    lines = []
    for vid in ordered:
        info = graph.vertex_by_id(vid)
        lines.append(f"{info.name},{info.type},{info.visit_time}")
    _write_lines(path, lines)


def store_edges(path: str | Path, graph: LGraph) -> None:
    """Write every road once, ordered by length, in the edges file format."""
    _write_lines(path, format_edges(graph))


class _Tokens:
    """Whitespace-separated words read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def number(self) -> int:
        return int(self.word())


def _prompt(text: str) -> None:
    print(text, end="")


def _vertex_menu(graph: LGraph, tokens: _Tokens) -> None:
    _prompt(VERTEX_MENU)
    choice = tokens.number()
    if choice == 1:
        _prompt("请输入顶点名称：")
        name = tokens.word()
        try:
            v = graph.get_vertex(name)
        except GraphError:
            print(f"名称为 {name} 的顶点不存在")
            return
        print(f"顶点名称：{v.name}")
        print(f"顶点类型：{v.type}")
        print(f"建议游览时间：{v.visit_time}")
    elif choice == 2:
        print("顶点名称, 顶点类型, 建议游览时间：")
        for line in format_nodes(graph):
            print(line)
    elif choice == 3:
        _prompt("请输入顶点名称，顶点类型，建议游览时间(空格分隔)：")
        name, type_ = tokens.word(), tokens.word()
        visit_time = tokens.number()
        try:
            graph.insert_vertex(LocationInfo(name, visit_time, type_))
        except GraphError as exc:
            print(exc)
    elif choice == 4:
        _prompt("请输入顶点名称：")
        graph.delete_vertex(tokens.word())
    elif choice == 5:
        print(f"正在将顶点存储到{STORED_NODES}中...")
        store_nodes(STORED_NODES, graph)
        print("存储成功！")
    elif choice == 6:
        _prompt("请输入要修改的地点名称：")
        name = tokens.word()
        try:
            v = graph.get_vertex(name)
            print(f"当前地点: {v.name}, 当前参观时间: {v.visit_time} 分钟")
            _prompt("请输入新的参观时间(分钟)：")
            new_time = tokens.number()
            graph.update_vertex(v.name, replace(v, visit_time=new_time))
            print(f"参观时间已更新为 {new_time} 分钟！")
        except GraphError as exc:
            print(f"错误: {exc}")
    elif choice == 7:
        _prompt(
            "请输入要查找的类别（如 Teaching_Research_and_Administration, dormitory 等）："
        )
        category = tokens.word()
        print(f'类别为 "{category}" 的地点：')
        matches = [
            info
            for info in map(graph.vertex_by_id, sorted(graph.names().values()))
            if info.type == category
        ]
        for info in matches:
            print(f"名称: {info.name}, 参观时间: {info.visit_time} 分钟")
        if not matches:
            print(f'未找到类别为 "{category}" 的地点。')


def _edge_menu(graph: LGraph, tokens: _Tokens) -> None:
    _prompt(EDGE_MENU)
    choice = tokens.number()
    if choice == 1:
        _prompt("请输入边的起点与终点(空格分隔)：")
        source, dest = tokens.word(), tokens.word()
        try:
            weight = graph.get_edge(source, dest)
        except GraphError:
            print(f"{source} <---> {dest} 不存在！")
            return
        print(f"{source} <---> {dest} 距离为：{weight}")
    elif choice == 2:
        print("起点, 终点, 距离：")
        for line in format_edges(graph):
            print(line)
    elif choice == 3:
        _prompt("请输入起点名称，终点名称，距离(空格分隔)：")
        source, dest = tokens.word(), tokens.word()
        length = tokens.number()
        try:
            graph.insert_edge(source, dest, length)
        except GraphError as exc:
            print(exc)
    elif choice == 4:
        _prompt("请输入起点名称，终点名称(空格分隔)：")
        source, dest = tokens.word(), tokens.word()
        graph.delete_edge(source, dest)
    elif choice == 5:
        print(f"正在将边存储到{STORED_EDGES}文件中...")
        store_edges(STORED_EDGES, graph)
        print("存储成功！")
    elif choice == 6:
        _prompt("请输入要修改的边的起点和终点（空格分隔）：")
        source, dest = tokens.word(), tokens.word()
        try:
            current = graph.get_edge(source, dest)
            print(f"当前权重: {source} <-> {dest} = {current}米")
            _prompt("请输入新的权重（米）：")
            new_weight = tokens.number()
            graph.update_edge(source, dest, new_weight)
            print(f"权重已更新为 {new_weight}米！")
        except GraphError as exc:
            print(f"错误: {exc}")
    elif choice == 7:
        _prompt("请输入地点名称：")
        location = tokens.word()
        index = graph.names()
        if location not in index:
            print(f"地点 '{location}' 不存在！")
            return
        roads = graph.adjacency(index[location])
        print(f"与 {location} 相连的道路：")
        if not roads:
            print("  该地点没有相连的道路。")
        for edge in roads:
            neighbor = graph.vertex_by_id(edge.dest).name
            print(f"  {location} <-> {neighbor} (距离: {edge.weight}米)")


def _suggest_roads(graph: LGraph, tokens: _Tokens) -> None:
    if is_connected(graph):
        print("图是连通的，不需要添加道路。")
        return
    print("图不是连通的，建议添加以下道路：")
    suggestions = connection_suggestions(graph)
    for road in suggestions:
        print(f"添加道路: {road.source} <-> {road.dest} (长度: {road.weight}米)")
    _prompt("是否要添加这些道路？(y/n): ")
    if tokens.word()[0] not in "yY":
        return
    for road in suggestions:
        graph.insert_edge(road.source, road.dest, road.weight)
    print(f"已添加 {len(suggestions)} 条道路。")
    if is_connected(graph):
        print("现在图已连通！")
    else:
        print("添加后图仍未连通，请检查。")


def _shortest_path(graph: LGraph, tokens: _Tokens) -> None:
    print("请输入两个地点，使用空格分开：")
    x, y = tokens.word(), tokens.word()
    try:
        result = shortest_path(graph, x, y)
    except GraphError:
        print("你找到了虚空的距离")
        return
    distance = result.distance if result.reachable else -1
    print(f"{x}和{y}之间的最短距离为：{distance}")
    print(f"最短路径为：{result.path_string}")


def _spanning_tree(graph: LGraph) -> None:
    if not is_connected(graph):
        print("图不连通")
        return
    print("最小生成树的点如下：", end="")
    total = 0
    for edge in minimum_spanning_tree(graph):
        source = graph.vertex_by_id(edge.source).name
        dest = graph.vertex_by_id(edge.dest).name
        print(f"{source},{dest},{edge.weight}")
        total += edge.weight
    print(f"总权重为{total}")


def _topological_path(graph: LGraph, tokens: _Tokens) -> None:
    print("请输入您希望的拓扑序，第一行一个n为序列长度，第二行n个地点为拓扑序列")
    count = tokens.number()
    order = [tokens.word() for _ in range(count)]
    result = topological_shortest_path(graph, order)
    if result.reachable:
        print(f"最短路径为：{result.route_string}")
        print(f"最短路径为{result.distance}")
    else:
        print("无可行路径")
        print("最短路径为-1")


def _teaching_visit(graph: LGraph, tokens: _Tokens) -> None:
    while True:
        print("请选择起始校门（输入编号，0返回主菜单）：")
        for number, gate in enumerate(GATES, start=1):
            print(f"{number}. {gate}")
        print("0. 返回主菜单")
        choice = tokens.number()
        if choice == 0:
            return
        if not 1 <= choice <= len(GATES):
            print("输入错误，请重新选择。")
            continue
        try:
            result = plan_teaching_visit(graph, GATES[choice - 1])
        except GraphError as exc:
            print(f"路径规划失败：{exc}")
            continue
        print(f"参观路径为：{result.path_string}")
        print(f"总花费时间为：{result.total_time_minutes}分")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campusnav", description="Interactive campus navigation."
    )
    parser.add_argument("--nodes", default=DEFAULT_NODES, help="locations CSV file")
    parser.add_argument("--edges", default=DEFAULT_EDGES, help="roads CSV file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        graph = load_graph(LGraph(directed=False), args.nodes, args.edges)
    except (OSError, ValueError, GraphError) as exc:
        print(f"无法加载地图: {exc}", file=sys.stderr)
        return 1
    tokens = _Tokens(sys.stdin)
    try:
        while True:
            _prompt(MAIN_MENU)
            try:
                choice = tokens.number()
            except ValueError:
                choice = 0
            try:
                if choice == 1:
                    _vertex_menu(graph, tokens)
                elif choice == 2:
                    _edge_menu(graph, tokens)
                elif choice == 3:
                    graph = load_graph(LGraph(directed=False), args.nodes, args.edges)
                elif choice == 4:
                    _suggest_roads(graph, tokens)
                elif choice == 5:
                    exists = has_euler_circuit(graph)
                    print("存在欧拉回路" if exists else "不存在欧拉回路")
                elif choice == 6:
                    _shortest_path(graph, tokens)
                elif choice == 7:
                    _spanning_tree(graph)
                elif choice == 8:
                    _topological_path(graph, tokens)
                elif choice == 9:
                    _teaching_visit(graph, tokens)
                else:
                    print(FAREWELL)
                    return 0
            except ValueError:
                print("输入错误。")
            except GraphError as exc:
                print(f"错误: {exc}")
    except EOFError:
        print(FAREWELL)
    return 0


if __name__ == "__main__":
    sys.exit(main())